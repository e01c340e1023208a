# src/repo_snapshot/models.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

DEFAULT_BRANCH_CANDIDATES: Tuple[str, ...] = ("main", "master")


@dataclass(frozen=True)
class FetchRequest:
    source_url: str
    timeout_seconds: int = 30
    # Pinned branch; None means resolve main/master against the remote.
    branch: Optional[str] = None

    def __post_init__(self) -> None:
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {self.timeout_seconds}")


@dataclass(frozen=True)
class ResolvedTarget:
    clone_url: str
    subpath: str = ""

    @property
    def repo_name(self) -> str:
        name = self.clone_url.rstrip("/").rsplit("/", 1)[-1]
        return name[:-4] if name.endswith(".git") else name


@dataclass(frozen=True)
class AggregatedContent:
    """Direct-child files of one directory, in enumeration order."""

    subpath: str
    entries: Tuple[Tuple[str, str], ...] = ()

    @property
    def file_names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.entries)

    def render(self) -> str:
        return "".join(f"File: {self.subpath}/{name}\n{text}\n\n" for name, text in self.entries)


@dataclass(frozen=True)
class SnapshotResult:
    target: ResolvedTarget
    branch: str
    commit: str
    aggregated: AggregatedContent
    saved_path: Optional[Path] = None

    @property
    def content(self) -> str:
        return self.aggregated.render()
