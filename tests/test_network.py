"""Fetches from github.com; opt in with RUN_NETWORK_TESTS=1."""

import os

import pytest

from repo_snapshot.models import FetchRequest
from repo_snapshot.services import SnapshotService

pytestmark = pytest.mark.skipif(
    os.getenv("RUN_NETWORK_TESTS") != "1", reason="set RUN_NETWORK_TESTS=1 to reach github.com"
)


def test_public_repository_with_single_file(tmp_path) -> None:
    result = SnapshotService(work_root=tmp_path).fetch(
        FetchRequest("https://github.com/octocat/Hello-World", timeout_seconds=60)
    )

    assert result.branch == "master"
    assert result.content.startswith("File: /README\n")
    assert "Hello World!" in result.content
    assert result.content.count("File: ") == 1
    assert list(tmp_path.iterdir()) == []
