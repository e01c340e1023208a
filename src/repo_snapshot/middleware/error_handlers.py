# src/repo_snapshot/middleware/error_handlers.py
from __future__ import annotations
import logging
from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from ..errors import SnapshotError

logger = logging.getLogger("app.errors")


def add_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(SnapshotError)
    async def snapshot_exception_handler(request, exc: SnapshotError):
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
        return PlainTextResponse(str(exc), status_code=500)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(_, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail, "status_code": exc.status_code},
        )

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(_, exc: ValidationError):
        logger.debug("Validation error: %s", exc)
        return JSONResponse(status_code=422, content={"detail": exc.errors()})

    @app.exception_handler(Exception)
    async def generic_exception_handler(_, exc: Exception):
        logger.exception("Unhandled exception: %s", exc)
        return PlainTextResponse(f"Internal Server Error: {exc}", status_code=500)
