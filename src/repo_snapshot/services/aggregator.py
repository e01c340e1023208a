# src/repo_snapshot/services/aggregator.py
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Tuple

from ..errors import InvalidUrlError, IoError
from ..models import AggregatedContent
from ..util.fs import ensure_under_root

logger = logging.getLogger("app.aggregator")


def _is_regular_file(entry: os.DirEntry, root: Path) -> bool:
    # Symlinks only count when they land on a regular file inside the checkout.
    if entry.is_symlink():
        try:
            target = ensure_under_root(root, Path(entry.path).resolve())
        except (InvalidUrlError, OSError):
            return False
        return target.is_file()
    return entry.is_file(follow_symlinks=False)


def aggregate(root: str | Path, subpath: str) -> AggregatedContent:
    """
    Read the direct-child files of `root/subpath` in directory-listing order.

    No sorting and no recursion. Content is decoded as UTF-8 with replacement
    characters for invalid bytes. Any read failure aborts the whole aggregation.
    """
    root_p = Path(root).resolve()
    folder = ensure_under_root(root_p, subpath)

    if not folder.exists():
        raise InvalidUrlError(f"Folder {subpath} not found in the repository.")
    if not folder.is_dir():
        raise InvalidUrlError(f"{subpath} is not a directory.")

    entries: List[Tuple[str, str]] = []
    try:
        with os.scandir(folder) as it:
            for entry in it:
                if not _is_regular_file(entry, root_p):
                    continue
                data = Path(entry.path).read_bytes()
                entries.append((entry.name, data.decode("utf-8", errors="replace")))
    except OSError as e:
        raise IoError(f"reading {subpath or '.'}: {e}") from e

    logger.info("Aggregated %d file(s) from %r", len(entries), subpath)
    return AggregatedContent(subpath=subpath, entries=tuple(entries))
