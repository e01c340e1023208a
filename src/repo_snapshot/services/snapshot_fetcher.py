# src/repo_snapshot/services/snapshot_fetcher.py
from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional

os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")
import git  # GitPython

from ..errors import GitCloneError
from ..util.fs import workspace
from ..util.git_cmd import ProcessRunner, format_cmd

logger = logging.getLogger("app.fetcher")

CLONE_DEPTH = 1


@dataclass(frozen=True)
class ClonedWorkspace:
    path: Path
    branch: str
    commit: str


def clone_command(clone_url: str, branch: str, dest: Path, *, git_executable: str = "git") -> List[str]:
    return [
        git_executable, "clone",
        "--depth", str(CLONE_DEPTH),
        "--single-branch",
        "--branch", branch,
        clone_url,
        str(dest),
    ]


def _head_commit(path: Path, branch: str) -> str:
    """Confirm `path` holds a checkout and return its HEAD sha."""
    try:
        with git.Repo(path) as repo:
            return repo.head.commit.hexsha
    except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError, ValueError) as e:
        raise GitCloneError(f"clone of branch {branch} did not produce a checkout: {e!r}") from e


@contextmanager
def shallow_clone(
    clone_url: str,
    branch: str,
    timeout: int,
    runner: ProcessRunner,
    *,
    work_root: Optional[str | Path] = None,
    git_executable: str = "git",
) -> Iterator[ClonedWorkspace]:
    """
    Depth-1, single-branch clone of `branch` into a private workspace.

    The workspace and everything in it is removed when the block exits,
    including when the clone itself fails or times out.
    """
    with workspace(work_root) as path:
        argv = clone_command(clone_url, branch, path, git_executable=git_executable)
        logger.info("Cloning %s@%s (timeout=%ss)", clone_url, branch, timeout)
        start = time.monotonic()
        result = runner.run(argv, timeout=timeout)

        if result.timed_out:
            raise GitCloneError(f"git clone timed out after {timeout} seconds: {clone_url}")
        if result.returncode != 0:
            detail = result.stderr.strip()
            raise GitCloneError(
                f"git clone failed (exit {result.returncode}): {format_cmd(argv)}"
                + (f"\n{detail}" if detail else "")
            )

        commit = _head_commit(path, branch)
        logger.info(
            "Cloned %s@%s at %s (%.2f s)", clone_url, branch, commit[:12], time.monotonic() - start
        )
        yield ClonedWorkspace(path=path, branch=branch, commit=commit)
