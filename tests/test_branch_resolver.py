import pytest

from repo_snapshot.errors import GitCloneError
from repo_snapshot.services.branch_resolver import parse_heads, resolve_branch, select_branch
from repo_snapshot.util.git_cmd import ProcessResult

CLONE_URL = "https://github.com/owner/repo.git"


def test_parse_heads_extracts_branch_names_and_ignores_other_lines() -> None:
    output = (
        "1111111111111111111111111111111111111111\trefs/heads/main\n"
        "2222222222222222222222222222222222222222\trefs/heads/feature/x\n"
        "3333333333333333333333333333333333333333\trefs/tags/v1.0\n"
        "garbage\n"
        "\n"
    )

    assert parse_heads(output) == ["main", "feature/x"]


def test_main_preferred_when_both_exist(fake_runner) -> None:
    runner = fake_runner(heads=["master", "main", "dev"])

    assert resolve_branch(CLONE_URL, runner, timeout=5) == "main"
    assert runner.calls == [["git", "ls-remote", "--heads", CLONE_URL]]
    assert runner.timeouts == [5]


def test_master_used_when_main_missing(fake_runner) -> None:
    assert resolve_branch(CLONE_URL, fake_runner(heads=["master", "dev"]), timeout=5) == "master"


def test_no_candidate_branch_fails(fake_runner) -> None:
    with pytest.raises(GitCloneError, match="no candidate branch found"):
        resolve_branch(CLONE_URL, fake_runner(heads=["develop", "trunk"]), timeout=5)


def test_select_branch_never_picks_other_names() -> None:
    with pytest.raises(GitCloneError):
        select_branch(["mainline", "master-old"])


def test_nonzero_exit_is_clone_error(fake_runner) -> None:
    runner = fake_runner(ls_remote=ProcessResult(returncode=128, stderr="fatal: repository not found"))

    with pytest.raises(GitCloneError, match="repository not found"):
        resolve_branch(CLONE_URL, runner, timeout=5)


def test_timeout_is_clone_error(fake_runner) -> None:
    runner = fake_runner(ls_remote=ProcessResult(returncode=-1, timed_out=True))

    with pytest.raises(GitCloneError, match="timed out after 7 seconds"):
        resolve_branch(CLONE_URL, runner, timeout=7)


def test_custom_git_executable_is_used(fake_runner) -> None:
    runner = fake_runner()

    resolve_branch(CLONE_URL, runner, timeout=5, git="/usr/local/bin/git")

    assert runner.calls[0][0] == "/usr/local/bin/git"


def test_resolves_against_real_remote(github_remotes) -> None:
    add_remote, runner = github_remotes
    add_remote("owner", "legacy", {"README": "old"}, branch="master")

    assert resolve_branch("https://github.com/owner/legacy.git", runner, timeout=30) == "master"
