"""Shared test fixtures."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence

import pytest

os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")
import git

from repo_snapshot.util.git_cmd import ProcessResult, SubprocessRunner

ZERO_SHA = "0" * 40
ACTOR = git.Actor("Snapshot Test", "snapshot@example.com")


def create_repo(path: Path, files: Dict[str, str | bytes], *, branch: str = "main") -> str:
    """Initialise a repository at *path* holding *files* on *branch*; return the commit sha."""
    path.mkdir(parents=True, exist_ok=True)
    repo = git.Repo.init(path)
    try:
        for rel, content in files.items():
            target = path / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content, encoding="utf-8")
        if files:
            repo.index.add(list(files))
        repo.index.commit("initial", author=ACTOR, committer=ACTOR)
        repo.git.branch("-M", branch)
        return repo.head.commit.hexsha
    finally:
        repo.close()


def heads_output(branches: Iterable[str]) -> str:
    return "".join(f"{ZERO_SHA}\trefs/heads/{name}\n" for name in branches)


class FakeRunner:
    """
    Stands in for git: answers `ls-remote` with canned heads and either
    materialises a real checkout for `clone` or returns a canned failure.
    """

    def __init__(
        self,
        heads: Sequence[str] = ("main",),
        files: Optional[Dict[str, str | bytes]] = None,
        *,
        ls_remote: Optional[ProcessResult] = None,
        clone: Optional[ProcessResult] = None,
    ) -> None:
        self.heads = heads
        self.files = files or {}
        self.ls_remote = ls_remote
        self.clone = clone
        self.calls: List[List[str]] = []
        self.timeouts: List[int] = []
        self.clone_dest: Optional[Path] = None

    def run(self, argv: Sequence[str], *, timeout: int, cwd: Optional[str] = None) -> ProcessResult:
        self.calls.append(list(argv))
        self.timeouts.append(timeout)
        if "ls-remote" in argv:
            return self.ls_remote or ProcessResult(returncode=0, stdout=heads_output(self.heads))
        if "clone" in argv:
            dest = Path(argv[-1])
            self.clone_dest = dest
            if self.clone is not None:
                # leave partial state behind, like an interrupted clone
                (dest / ".git").mkdir(exist_ok=True)
                (dest / ".git" / "partial").write_text("x", encoding="utf-8")
                return self.clone
            branch = argv[list(argv).index("--branch") + 1]
            create_repo(dest, self.files, branch=branch)
            return ProcessResult(returncode=0)
        raise AssertionError(f"unexpected command: {argv}")


@pytest.fixture
def fake_runner() -> Callable[..., FakeRunner]:
    return FakeRunner


@pytest.fixture
def github_remotes(tmp_path: Path):
    """
    Directory of bare repositories served in place of https://github.com/,
    plus a SubprocessRunner whose git rewrites GitHub URLs to it.

    Returns ``(add_remote, runner)`` where ``add_remote(owner, repo, files, branch=...)``
    publishes a repository.
    """
    remotes = tmp_path / "remotes"
    remotes.mkdir()
    runner = SubprocessRunner(
        extra_env={
            "GIT_CONFIG_COUNT": "1",
            "GIT_CONFIG_KEY_0": f"url.{remotes.as_uri()}/.insteadOf",
            "GIT_CONFIG_VALUE_0": "https://github.com/",
        }
    )

    def add_remote(owner: str, repo: str, files: Dict[str, str | bytes], *, branch: str = "main") -> str:
        work = tmp_path / "work" / owner / repo
        commit = create_repo(work, files, branch=branch)
        with git.Repo(work) as source:
            source.clone(str(remotes / owner / f"{repo}.git"), bare=True).close()
        return commit

    return add_remote, runner
