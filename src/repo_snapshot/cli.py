# src/repo_snapshot/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import settings
from .errors import SnapshotError
from .logging_conf import setup_logging
from .models import FetchRequest
from .services import SnapshotService

logger = logging.getLogger("app.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="repo-snapshot",
        description="Print the files of one GitHub repository folder as a single text document",
    )
    parser.add_argument("url", help="GitHub URL, e.g. https://github.com/<owner>/<repo>/tree/main/docs")
    parser.add_argument(
        "--timeout", type=int, default=settings.clone_timeout_seconds,
        help="Seconds allowed for each git command (default: %(default)s)",
    )
    parser.add_argument("--branch", default=None, help="Clone this branch instead of resolving main/master")
    parser.add_argument(
        "--output-dir", default=settings.output_dir,
        help="Also save the snapshot as <repo>_<folder>.txt in this directory",
    )
    parser.add_argument("--work-root", default=settings.work_root, help="Parent directory for temporary clones")
    parser.add_argument("--log-level", default="WARNING", help="Logging level on stderr (default: %(default)s)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if args.timeout <= 0:
        print("repo-snapshot: --timeout must be positive", file=sys.stderr)
        return 2

    service = SnapshotService(work_root=args.work_root, output_dir=args.output_dir)
    try:
        result = service.fetch(FetchRequest(source_url=args.url, timeout_seconds=args.timeout, branch=args.branch))
    except SnapshotError as e:
        print(f"repo-snapshot: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(result.content)
    if result.saved_path is not None:
        print(f"saved {result.saved_path}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
