# app/middleware/error_handlers.py
from __future__ import annotations
import logging
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from app.errors import ErrorKind, ResolveError

logger = logging.getLogger("app.errors")


def error_response(exc: ResolveError) -> PlainTextResponse:
    if exc.kind is ErrorKind.VALIDATION:
        return PlainTextResponse(exc.message, status_code=400)
    if exc.status:
        # upstream 5xx is reported as a bad gateway, not as our own failure
        status = 502 if 500 <= exc.status <= 599 else exc.status
        return PlainTextResponse(
            f"failed to fetch git repo info (status: {exc.status}, message: {exc.message})",
            status_code=status,
        )
    return PlainTextResponse(f"failed to fetch git repo info: {exc.message}", status_code=500)


def add_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ResolveError)
    async def resolve_error_handler(_, exc: ResolveError):
        logger.debug("Resolve error: %r", exc)
        return error_response(exc)

    @app.exception_handler(Exception)
    async def generic_exception_handler(_, exc: Exception):
        logger.exception("Unhandled exception: %s", exc)
        return PlainTextResponse("Internal Server Error", status_code=500)
