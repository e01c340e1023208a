# src/repo_snapshot/routers/snapshot_router.py
from __future__ import annotations

import asyncio
from functools import lru_cache
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from ..config import settings
from ..models import FetchRequest
from ..services import SnapshotService, default_service

router = APIRouter(tags=["snapshot"])


@lru_cache(maxsize=1)
def get_snapshot_service() -> SnapshotService:
    return default_service()


@router.get("/{org}/{repo}", response_class=PlainTextResponse)
async def fetch_repo(
    org: str,
    repo: str,
    branch: Optional[str] = Query(default=None, description="Pin a branch instead of resolving main/master"),
    service: SnapshotService = Depends(get_snapshot_service),
):
    request = FetchRequest(
        source_url=f"https://github.com/{org}/{repo}",
        timeout_seconds=settings.clone_timeout_seconds,
        branch=branch or None,
    )
    # Clone and file reads block; keep them off the event loop.
    result = await asyncio.to_thread(service.fetch, request)
    # header values are latin-1 on the wire
    return PlainTextResponse(
        result.content,
        headers={"X-Snapshot-Branch": quote(result.branch, safe="/"), "X-Snapshot-Commit": result.commit},
    )
