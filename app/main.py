# app/main.py
from __future__ import annotations

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import settings
from app.logging_conf import setup_logging
from app.middleware import add_cors, install_request_logging, add_error_handlers
from app.routers import resolve_router, health_router

logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Starting %s on %s:%s (git host %s)", settings.app_name, settings.host, settings.port, settings.git_base_url)
    yield
    logger.info("Shutdown complete")


app = FastAPI(title=settings.app_name, lifespan=lifespan)

# Middlewares
add_cors(app)
install_request_logging(app)
add_error_handlers(app)

# Routers
app.include_router(health_router)
app.include_router(resolve_router)


if __name__ == "__main__":
    import uvicorn

    reload_flag = os.getenv("RELOAD", "0") in ("1", "true", "True")
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=reload_flag,
        log_level=settings.log_level.lower(),
    )
