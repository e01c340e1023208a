from .aggregator import aggregate
from .branch_resolver import parse_heads, resolve_branch, select_branch
from .persistence import output_file_name, persist
from .snapshot_fetcher import ClonedWorkspace, shallow_clone
from .snapshot_service import SnapshotService, default_service, fetch_snapshot
from .url_resolver import resolve_url

__all__ = [
    "aggregate",
    "parse_heads",
    "resolve_branch",
    "select_branch",
    "output_file_name",
    "persist",
    "ClonedWorkspace",
    "shallow_clone",
    "SnapshotService",
    "default_service",
    "fetch_snapshot",
    "resolve_url",
]
