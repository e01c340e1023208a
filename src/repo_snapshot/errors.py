# src/repo_snapshot/errors.py
from __future__ import annotations


class SnapshotError(RuntimeError):
    """
    Base of the closed error taxonomy raised by the snapshot core.
    Callers treat every subclass as terminal for the request (no retries).
    """

    kind: str = "Snapshot error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class IoError(SnapshotError):
    """Local filesystem or process-launch failure."""

    kind = "IO error"


class UrlParseError(SnapshotError):
    """The input string is not a syntactically valid URL."""

    kind = "URL parse error"


class GitCloneError(SnapshotError):
    """Remote branch listing or clone failed, timed out, or no acceptable branch exists."""

    kind = "Git clone error"


class InvalidUrlError(SnapshotError):
    """Syntactically valid URL that cannot be used (too few segments, missing folder)."""

    kind = "Invalid URL error"


__all__ = ["SnapshotError", "IoError", "UrlParseError", "GitCloneError", "InvalidUrlError"]
