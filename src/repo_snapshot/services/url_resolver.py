# src/repo_snapshot/services/url_resolver.py
from __future__ import annotations

import logging
from typing import List
from urllib.parse import urlsplit

from ..errors import InvalidUrlError, UrlParseError
from ..models import ResolvedTarget

logger = logging.getLogger("app.resolver.url")

GITHUB_CLONE_BASE = "https://github.com"
TREE_MARKER = "tree"

# Without a tree/<branch> marker everything after owner/repo is the subpath.
SUBPATH_OFFSET = 2


def _path_segments(source_url: str) -> List[str]:
    try:
        parts = urlsplit(source_url)
    except ValueError as e:
        raise UrlParseError(f"{source_url!r}: {e}") from e
    if not parts.scheme or not parts.netloc:
        raise UrlParseError(f"{source_url!r}: relative URL without a base")
    return [seg for seg in parts.path.split("/") if seg]


def resolve_url(source_url: str) -> ResolvedTarget:
    """
    Turn a GitHub web URL into a clone URL and the folder to aggregate.

      https://github.com/<owner>/<repo>                        -> subpath ""
      https://github.com/<owner>/<repo>/<a>/<b>                -> subpath "a/b"
      https://github.com/<owner>/<repo>/tree/<branch>/<a>/<b>  -> subpath "a/b"
    """
    segments = _path_segments(source_url)
    if len(segments) < 2:
        raise InvalidUrlError(f"{source_url!r} needs at least <owner>/<repo> in its path")

    owner, repo = segments[0], segments[1]
    if repo.endswith(".git"):
        repo = repo[:-4]
    clone_url = f"{GITHUB_CLONE_BASE}/{owner}/{repo}.git"

    rest = segments[SUBPATH_OFFSET:]
    if rest and rest[0] == TREE_MARKER:
        rest = rest[2:]
    subpath = "/".join(rest)

    logger.debug("resolved %s -> clone_url=%s subpath=%r", source_url, clone_url, subpath)
    return ResolvedTarget(clone_url=clone_url, subpath=subpath)
