"""Steps shared by the create-branch and create-pr workflows."""

import structlog
import typer

from gh_buddy.configuration.models import BaseConfig
from gh_buddy.configuration.reconcile import parse_issue_number
from gh_buddy.git.abc import VersionControlGatewayBase
from gh_buddy.git.exceptions import GitCommandError
from gh_buddy.github.abc import RepositoryGatewayBase
from gh_buddy.github.exceptions import GitHubCLIError
from gh_buddy.prompt.terminal import TerminalPrompter

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def resolve_repository(git: VersionControlGatewayBase, remote: str) -> str:
    """Return the 'owner/repo' slug of the remote, with context if it cannot be read."""
    try:
        return git.get_repo_slug(remote)
    except GitCommandError as exc:
        raise GitCommandError(f"not in a git repository or no {remote} remote: {exc}") from exc


def resolve_base_branch(
    base_branch: str | None,
    config: BaseConfig,
    git: VersionControlGatewayBase,
    prompter: TerminalPrompter,
) -> str:
    """Return the base branch, proposing the remote's default branch when none was given."""
    if base_branch:
        return base_branch
    try:
        default_base = git.get_default_branch(config.remote)
    except GitCommandError as exc:
        logger.warning("Could not determine default branch", fallback=config.fallback_base_branch, error=str(exc))
        default_base = config.fallback_base_branch
    if config.assume_yes:
        return default_base
    return prompter.input("Base branch", default_base)


def prompt_for_issue_number(github: RepositoryGatewayBase, prompter: TerminalPrompter) -> int:
    """Let the user pick one of their assigned open issues, or type an issue number.

    Listing assigned issues is best-effort: on failure the user enters the number manually.
    """
    try:
        issues = github.list_assigned_open_issues()
    except GitHubCLIError as exc:
        logger.warning("Could not list assigned issues, falling back to manual entry", error=str(exc))
        return parse_issue_number(prompter.input("Issue number"))

    if not issues:
        return parse_issue_number(prompter.input("No issues assigned to you. Enter issue number"))

    try:
        username = github.get_current_username()
    except GitHubCLIError as exc:
        logger.debug("Could not determine current user", error=str(exc))
        username = None

    options = [f"#{issue.number} - {issue.title}" for issue in issues]
    message = f"Select an issue assigned to {username}:" if username else "Select an issue:"
    index = prompter.select(message, options)
    return issues[index].number


def warn_if_uncommitted_changes(git: VersionControlGatewayBase, message: str) -> None:
    """Echo a warning when the working tree is dirty; a failed check is only logged."""
    try:
        dirty = git.has_uncommitted_changes()
    except GitCommandError as exc:
        logger.debug("Could not check for uncommitted changes", error=str(exc))
        return
    if dirty:
        typer.echo(f"⚠️  {message}", err=True)
