# app/middleware/logging.py
from __future__ import annotations
import time
import logging
from fastapi import FastAPI, Request

logger = logging.getLogger("app.middleware")


def _target(request: Request) -> str:
    # never log the raw query string, it may carry GITHUB_TOKEN
    owner = request.query_params.get("owner")
    repo = request.query_params.get("repo")
    if not (owner or repo):
        return ""
    ref = request.query_params.get("ref") or "<default>"
    return f" [{owner}/{repo}@{ref}]"


def install_request_logging(app: FastAPI) -> None:
    @app.middleware("http")
    async def _log_requests(request: Request, call_next):
        start = time.perf_counter()
        what = f"{request.method} {request.url.path}{_target(request)}"
        try:
            response = await call_next(request)
        except Exception as ex:
            duration = (time.perf_counter() - start) * 1000.0
            logger.exception("Unhandled error during %s (%.2f ms): %s", what, duration, ex)
            raise
        duration = (time.perf_counter() - start) * 1000.0
        logger.info("%s -> %s (%.2f ms)", what, response.status_code, duration)
        return response
