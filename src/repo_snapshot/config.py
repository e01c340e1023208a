# src/repo_snapshot/config.py
from __future__ import annotations
import os
from typing import Optional

from pydantic import BaseModel


class Settings(BaseModel):
    # App
    app_name: str = os.getenv("APP_NAME", "Repo Snapshot Service")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))
    service_name: str = os.getenv("SERVICE_NAME", "repo-snapshot-service")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Fetch
    clone_timeout_seconds: int = int(os.getenv("CLONE_TIMEOUT_SECONDS", "30"))
    git_executable: str = os.getenv("GIT_EXECUTABLE", "git")
    # None -> system temp dir
    work_root: Optional[str] = os.getenv("REPO_WORK_ROOT") or None
    # None -> snapshots are not written to disk
    output_dir: Optional[str] = os.getenv("SNAPSHOT_OUTPUT_DIR") or None


settings = Settings()
