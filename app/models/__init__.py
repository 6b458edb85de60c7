from .resolution import ResolutionRequest, ResolutionResult

__all__ = ["ResolutionRequest", "ResolutionResult"]
