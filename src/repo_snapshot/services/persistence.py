# src/repo_snapshot/services/persistence.py
from __future__ import annotations

import logging
from pathlib import Path

from ..models import AggregatedContent, ResolvedTarget

logger = logging.getLogger("app.persistence")


def output_file_name(target: ResolvedTarget) -> str:
    """`<repo>_<subpath with / as _>.txt`"""
    return f"{target.repo_name}_{target.subpath.replace('/', '_')}.txt"


def persist(content: AggregatedContent | str, target: ResolvedTarget, output_dir: str | Path) -> Path:
    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / output_file_name(target)
    text = content.render() if isinstance(content, AggregatedContent) else content
    path.write_text(text, encoding="utf-8")
    logger.info("Saved snapshot of %s to %s", target.clone_url, path)
    return path
