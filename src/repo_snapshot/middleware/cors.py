# src/repo_snapshot/middleware/cors.py
from __future__ import annotations
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


def add_cors(app: FastAPI) -> None:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],          # tighten in prod
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=["X-Correlation-ID", "X-Snapshot-Branch", "X-Snapshot-Commit"],
        max_age=600,
    )
