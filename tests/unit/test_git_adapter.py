"""Unit tests for the git backed version control gateway."""

import subprocess
from pathlib import Path
from typing import Callable
from unittest.mock import MagicMock, call

import pytest
from pytest import MonkeyPatch

from gh_buddy.git.adapter import GitAdapter
from gh_buddy.git.exceptions import GitCommandError

CompletedProcessFactory = Callable[..., subprocess.CompletedProcess[str]]


@pytest.fixture
def run_command_mock(monkeypatch: MonkeyPatch) -> MagicMock:
    """Replace run_command in the adapter module with a mock."""
    mock = MagicMock()
    monkeypatch.setattr("gh_buddy.git.adapter.run_command", mock)
    return mock


def test_get_current_branch(run_command_mock: MagicMock, completed_process: CompletedProcessFactory) -> None:
    """Test reading the checked out branch."""
    run_command_mock.return_value = completed_process(stdout="feature/GH-42-add-login-page\n")
    assert GitAdapter().get_current_branch() == "feature/GH-42-add-login-page"
    run_command_mock.assert_called_once_with(["git", "rev-parse", "--abbrev-ref", "HEAD"], cwd=None)


def test_commands_run_in_configured_directory(run_command_mock: MagicMock, completed_process: CompletedProcessFactory, tmp_path: Path) -> None:
    """Test that the working directory is passed to every command."""
    run_command_mock.return_value = completed_process(stdout="main\n")
    GitAdapter(executable="/usr/bin/git", cwd=tmp_path).get_current_branch()
    run_command_mock.assert_called_once_with(["/usr/bin/git", "rev-parse", "--abbrev-ref", "HEAD"], cwd=tmp_path)


def test_create_and_checkout_branch(run_command_mock: MagicMock, completed_process: CompletedProcessFactory) -> None:
    """Test creating a branch from HEAD."""
    run_command_mock.return_value = completed_process()
    GitAdapter().create_and_checkout_branch("chore/cleanup")
    run_command_mock.assert_called_once_with(["git", "checkout", "-b", "chore/cleanup"], cwd=None)


def test_create_and_checkout_branch_failure(run_command_mock: MagicMock, completed_process: CompletedProcessFactory) -> None:
    """Test that an existing branch name is reported with context."""
    run_command_mock.return_value = completed_process(stderr="fatal: a branch named 'chore/cleanup' already exists", returncode=128)
    with pytest.raises(GitCommandError, match="failed to create branch 'chore/cleanup': fatal: a branch named"):
        GitAdapter().create_and_checkout_branch("chore/cleanup")


def test_create_branch_from_fetches_first(run_command_mock: MagicMock, completed_process: CompletedProcessFactory) -> None:
    """Test that the remote is fetched before branching from its base branch."""
    run_command_mock.return_value = completed_process()
    GitAdapter().create_branch_from("feature/GH-1-x", "develop", "origin")
    assert run_command_mock.call_args_list == [
        call(["git", "fetch", "origin"], cwd=None),
        call(["git", "checkout", "-b", "feature/GH-1-x", "origin/develop"], cwd=None),
    ]


def test_create_branch_from_stops_when_fetch_fails(run_command_mock: MagicMock, completed_process: CompletedProcessFactory) -> None:
    """Test that no branch is created when the fetch fails."""
    run_command_mock.return_value = completed_process(stderr="fatal: 'origin' does not appear to be a git repository", returncode=128)
    with pytest.raises(GitCommandError, match="failed to fetch from 'origin'"):
        GitAdapter().create_branch_from("feature/GH-1-x", "develop", "origin")
    assert run_command_mock.call_count == 1


def test_create_branch_from_checkout_failure(run_command_mock: MagicMock, completed_process: CompletedProcessFactory) -> None:
    """Test that a missing base branch is reported with the full ref."""
    run_command_mock.side_effect = [
        completed_process(),
        completed_process(stderr="fatal: 'origin/nope' is not a commit", returncode=128),
    ]
    with pytest.raises(GitCommandError, match="from 'origin/nope'"):
        GitAdapter().create_branch_from("feature/GH-1-x", "nope", "origin")


def test_push_branch(run_command_mock: MagicMock, completed_process: CompletedProcessFactory) -> None:
    """Test pushing with upstream tracking."""
    run_command_mock.return_value = completed_process()
    GitAdapter().push_branch("origin", "feature/GH-1-x")
    run_command_mock.assert_called_once_with(["git", "push", "-u", "origin", "feature/GH-1-x"], cwd=None)


def test_push_branch_failure(run_command_mock: MagicMock, completed_process: CompletedProcessFactory) -> None:
    """Test that a rejected push raises GitCommandError."""
    run_command_mock.return_value = completed_process(stderr="! [rejected]", returncode=1)
    with pytest.raises(GitCommandError, match="failed to push branch 'feature/GH-1-x' to 'origin'"):
        GitAdapter().push_branch("origin", "feature/GH-1-x")


def test_get_default_branch_from_remote_head(run_command_mock: MagicMock, completed_process: CompletedProcessFactory) -> None:
    """Test reading the default branch from the remote HEAD reference."""
    run_command_mock.return_value = completed_process(stdout="origin/develop\n")
    assert GitAdapter().get_default_branch("origin") == "develop"
    run_command_mock.assert_called_once_with(["git", "symbolic-ref", "refs/remotes/origin/HEAD", "--short"], cwd=None)


def test_get_default_branch_falls_back_to_master(run_command_mock: MagicMock, completed_process: CompletedProcessFactory) -> None:
    """Test probing main, then master, when the remote HEAD is not set."""
    run_command_mock.side_effect = [
        completed_process(stderr="fatal: ref refs/remotes/origin/HEAD is not a symbolic ref", returncode=128),
        completed_process(returncode=128),
        completed_process(stdout="abc123\n"),
    ]
    assert GitAdapter().get_default_branch("origin") == "master"
    assert run_command_mock.call_args_list[1] == call(["git", "rev-parse", "--verify", "origin/main"], cwd=None)
    assert run_command_mock.call_args_list[2] == call(["git", "rev-parse", "--verify", "origin/master"], cwd=None)


def test_get_default_branch_failure(run_command_mock: MagicMock, completed_process: CompletedProcessFactory) -> None:
    """Test that the default branch error is raised when no candidate exists."""
    run_command_mock.return_value = completed_process(returncode=128)
    with pytest.raises(GitCommandError, match="failed to determine default branch"):
        GitAdapter().get_default_branch("origin")


def test_get_repo_slug(run_command_mock: MagicMock, completed_process: CompletedProcessFactory) -> None:
    """Test resolving the repository slug from the remote URL."""
    run_command_mock.return_value = completed_process(stdout="git@github.com:octocat/hello.git\n")
    assert GitAdapter().get_repo_slug("origin") == "octocat/hello"
    run_command_mock.assert_called_once_with(["git", "remote", "get-url", "origin"], cwd=None)


def test_get_repo_slug_unparsable_url(run_command_mock: MagicMock, completed_process: CompletedProcessFactory) -> None:
    """Test that a remote that is not a GitHub-style URL raises GitCommandError."""
    run_command_mock.return_value = completed_process(stdout="/srv/git/project.git\n")
    with pytest.raises(GitCommandError, match="unable to parse repo slug"):
        GitAdapter().get_repo_slug("origin")


def test_get_repo_slug_missing_remote(run_command_mock: MagicMock, completed_process: CompletedProcessFactory) -> None:
    """Test that a missing remote raises GitCommandError."""
    run_command_mock.return_value = completed_process(stderr="error: No such remote 'origin'", returncode=2)
    with pytest.raises(GitCommandError, match="failed to get origin remote URL: error: No such remote"):
        GitAdapter().get_repo_slug("origin")


@pytest.mark.parametrize(
    "status_output,expected",
    [
        ("", False),
        ("\n", False),
        (" M gh_buddy/cli.py\n", True),
        ("?? notes.txt\n", True),
    ],
)
def test_has_uncommitted_changes(
    run_command_mock: MagicMock, completed_process: CompletedProcessFactory, status_output: str, expected: bool
) -> None:
    """Test detecting a dirty working tree from porcelain status output."""
    run_command_mock.return_value = completed_process(stdout=status_output)
    assert GitAdapter().has_uncommitted_changes() is expected
