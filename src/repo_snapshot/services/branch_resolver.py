# src/repo_snapshot/services/branch_resolver.py
from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from ..errors import GitCloneError
from ..models import DEFAULT_BRANCH_CANDIDATES
from ..util.git_cmd import ProcessRunner

logger = logging.getLogger("app.resolver.branch")

HEADS_PREFIX = "refs/heads/"


def parse_heads(output: str) -> List[str]:
    """Branch names from `git ls-remote --heads` output (`<sha>\\trefs/heads/<name>`)."""
    names: List[str] = []
    for line in output.splitlines():
        fields = line.split()
        if len(fields) < 2 or not fields[1].startswith(HEADS_PREFIX):
            continue
        names.append(fields[1][len(HEADS_PREFIX):])
    return names


def select_branch(names: Iterable[str], candidates: Sequence[str] = DEFAULT_BRANCH_CANDIDATES) -> str:
    available = set(names)
    for candidate in candidates:
        if candidate in available:
            return candidate
    raise GitCloneError("no candidate branch found (tried " + ", ".join(candidates) + ")")


def resolve_branch(clone_url: str, runner: ProcessRunner, timeout: int, *, git: str = "git") -> str:
    result = runner.run([git, "ls-remote", "--heads", clone_url], timeout=timeout)
    if result.timed_out:
        raise GitCloneError(f"listing remote branches of {clone_url} timed out after {timeout} seconds")
    if result.returncode != 0:
        detail = result.stderr.strip()
        raise GitCloneError(
            f"failed to fetch remote branches of {clone_url} (exit {result.returncode})"
            + (f": {detail}" if detail else "")
        )

    branch = select_branch(parse_heads(result.stdout))
    logger.info("Resolved default branch %s for %s", branch, clone_url)
    return branch
