# src/repo_snapshot/main.py
from __future__ import annotations

import os
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from .config import settings
from .logging_conf import setup_logging
from .middleware import (
    add_cors,
    add_correlation_middleware,
    install_request_logging,
    add_error_handlers,
)
from .routers import health_router, snapshot_router

logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    if settings.output_dir:
        logger.info("Snapshots will be saved under %s", settings.output_dir)
    yield
    logger.info("Shutdown complete")


app = FastAPI(title=settings.app_name, lifespan=lifespan)

# Middlewares (last added runs first)
add_cors(app)
install_request_logging(app)
add_correlation_middleware(app)
add_error_handlers(app)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Hello, world!"


# Routers; health before the /{org}/{repo} catch-all
app.include_router(health_router)
app.include_router(snapshot_router)


def run() -> None:
    import uvicorn

    reload_flag = os.getenv("RELOAD", "0") in ("1", "true", "True")
    uvicorn.run(
        "repo_snapshot.main:app",
        host=settings.host,
        port=settings.port,
        reload=reload_flag,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
