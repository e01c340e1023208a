# src/repo_snapshot/util/fs.py
from __future__ import annotations

import logging
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from ..errors import InvalidUrlError, IoError

logger = logging.getLogger("app.fs")

WORKSPACE_PREFIX = "snapshot_"


def ensure_under_root(root: str | Path, target: str | Path) -> Path:
    """
    Resolved `target` (relative paths are taken under `root`), refusing
    anything that lands outside `root` after symlinks and `..` are followed.
    """
    base = Path(root).resolve()
    resolved = (base / target).resolve()
    if resolved != base and base not in resolved.parents:
        raise InvalidUrlError(f"{target} is outside the repository")
    return resolved


def remove_tree(path: Path, attempts: int = 2) -> None:
    """
    Remove a directory and everything in it; a missing path is not an error.
    A writer racing the removal gets one more pass before the OSError surfaces.
    """
    for attempt in range(1, attempts + 1):
        try:
            shutil.rmtree(path)
            return
        except FileNotFoundError:
            if not path.exists():
                return
            if attempt == attempts:
                raise
        except OSError:
            if attempt == attempts:
                raise


@contextmanager
def workspace(work_root: Optional[str | Path] = None) -> Iterator[Path]:
    """
    Create a fresh, uniquely named directory and remove it (with all contents)
    when the block exits, however it exits.

    A failed removal is logged; it becomes an IoError only when the block
    itself succeeded, so it never masks the error that is already propagating.
    """
    try:
        if work_root is not None:
            Path(work_root).mkdir(parents=True, exist_ok=True)
        path = Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX, dir=work_root))
    except OSError as e:
        raise IoError(f"cannot create workspace: {e}") from e

    logger.debug("workspace created: %s", path)
    try:
        yield path
    except BaseException:
        _release(path, strict=False)
        raise
    else:
        _release(path, strict=True)


def _release(path: Path, *, strict: bool) -> None:
    try:
        remove_tree(path)
    except OSError as e:
        logger.warning("could not remove workspace %s: %s", path, e)
        if strict:
            raise IoError(f"cannot remove workspace {path}: {e}") from e
        return
    logger.debug("workspace removed: %s", path)
