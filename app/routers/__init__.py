from .resolve_router import router as resolve_router
from .health_router import router as health_router

__all__ = ["resolve_router", "health_router"]
