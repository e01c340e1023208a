# src/repo_snapshot/services/snapshot_service.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..config import settings
from ..models import FetchRequest, SnapshotResult
from ..util.git_cmd import ProcessRunner, SubprocessRunner
from .aggregator import aggregate
from .branch_resolver import resolve_branch
from .persistence import persist
from .snapshot_fetcher import shallow_clone
from .url_resolver import resolve_url

logger = logging.getLogger("app.snapshot")


class SnapshotService:
    """
    One full, fresh fetch per call:
      resolve URL -> resolve branch -> shallow clone -> aggregate -> (persist)

    Holds configuration only; nothing is shared between concurrent calls.
    """

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        *,
        work_root: Optional[str | Path] = None,
        output_dir: Optional[str | Path] = None,
        git_executable: Optional[str] = None,
    ):
        self.runner = runner or SubprocessRunner()
        self.work_root = work_root
        self.output_dir = output_dir
        self.git_executable = git_executable or settings.git_executable

    def fetch(self, request: FetchRequest) -> SnapshotResult:
        target = resolve_url(request.source_url)

        branch = request.branch or resolve_branch(
            target.clone_url, self.runner, request.timeout_seconds, git=self.git_executable
        )

        with shallow_clone(
            target.clone_url,
            branch,
            request.timeout_seconds,
            self.runner,
            work_root=self.work_root,
            git_executable=self.git_executable,
        ) as cloned:
            aggregated = aggregate(cloned.path, target.subpath)
            commit = cloned.commit

        saved_path = None
        if self.output_dir is not None:
            # Best effort: the in-memory result stands even if the write fails.
            try:
                saved_path = persist(aggregated, target, self.output_dir)
            except OSError as e:
                logger.warning("Could not save snapshot of %s: %s", target.clone_url, e)

        return SnapshotResult(
            target=target,
            branch=branch,
            commit=commit,
            aggregated=aggregated,
            saved_path=saved_path,
        )


def default_service() -> SnapshotService:
    return SnapshotService(work_root=settings.work_root, output_dir=settings.output_dir)


def fetch_snapshot(request: FetchRequest, service: Optional[SnapshotService] = None) -> SnapshotResult:
    return (service or default_service()).fetch(request)
