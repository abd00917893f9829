"""Defines the Command Line Interface (CLI) using Typer."""

from importlib.metadata import PackageNotFoundError, version

import structlog
import typer
from dotenv import load_dotenv
from typer import Option
from typing_extensions import Annotated

from gh_buddy.branch.types import all_issue_type_values
from gh_buddy.configuration.env import settings
from gh_buddy.configuration.models import CreateBranchConfig, CreatePullRequestConfig
from gh_buddy.configuration.reconcile import normalize_issue_number, validate_issue_type
from gh_buddy.exceptions import GhBuddyError
from gh_buddy.git.adapter import GitAdapter
from gh_buddy.github.gh_cli import GitHubCLIAdapter
from gh_buddy.prompt.terminal import TerminalPrompter
from gh_buddy.utils.logging import configure_logging
from gh_buddy.workflows.common import resolve_repository
from gh_buddy.workflows.create_branch import run_create_branch_workflow
from gh_buddy.workflows.create_pull_request import run_create_pull_request_workflow

load_dotenv()

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

typer_app = typer.Typer(
    help="Create branches and pull requests following consistent naming conventions, directly from GitHub issues.",
    pretty_exceptions_show_locals=False,
    no_args_is_help=True,
)


def _package_version() -> str:
    try:
        return version("gh-buddy")
    except PackageNotFoundError:
        return "dev"


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        typer.echo(f"gh-buddy {_package_version()}")
        raise typer.Exit()


@typer_app.callback()
def main_callback(
    ctx: typer.Context,
    yes: Annotated[bool, Option("--yes", "-y", envvar="GH_BUDDY_YES", help="Use the default proposed fields without prompting.")] = False,
    debug: Annotated[bool, Option("--debug", envvar="DEBUG", help="Enable debug logging.")] = settings.DEBUG,
    show_version: Annotated[
        bool, Option("--version", callback=version_callback, is_eager=True, help="Show the version and exit.")
    ] = False,
) -> None:
    """GitHub CLI Buddy: your friendly PR & branch companion."""
    configure_logging(debug)
    ctx.ensure_object(dict)
    ctx.obj["assume_yes"] = yes
    ctx.obj["debug"] = debug


def _fail(exc: GhBuddyError) -> typer.Exit:
    """Report an error the way every command does, and return the exit to raise."""
    logger.debug("Command failed", error_type=type(exc).__name__, error=str(exc))
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(1)


@typer_app.command(name="create-branch")
def create_branch_cli(
    ctx: typer.Context,
    issue: Annotated[str | None, Option("--issue", "-i", help="Issue number to create the branch from.")] = None,
    issue_type: Annotated[
        str | None,
        Option("--type", "-t", help=f"Branch type ({', '.join(all_issue_type_values())})."),
    ] = None,
    base: Annotated[str | None, Option("--base", "-b", help="Base branch to create from (default: repo default branch).")] = None,
    yes: Annotated[bool, Option("--yes", "-y", help="Use the default proposed fields without prompting.")] = False,
) -> None:
    """Create a local branch from an issue.

    The branch name is generated from the issue title, e.g. feature/GH-42-add-login-page.
    """
    try:
        config = CreateBranchConfig(
            assume_yes=yes or ctx.obj["assume_yes"],
            debug=ctx.obj["debug"],
            remote=settings.GH_BUDDY_REMOTE,
            fallback_base_branch=settings.GH_BUDDY_FALLBACK_BASE_BRANCH,
            default_issue_type=validate_issue_type(settings.GH_BUDDY_DEFAULT_ISSUE_TYPE),
            issue_number=normalize_issue_number(issue),
            issue_type=validate_issue_type(issue_type) if issue_type else None,
            base_branch=base,
        )
        git = GitAdapter(executable=settings.GIT_EXECUTABLE)
        repo = resolve_repository(git, config.remote)
        github = GitHubCLIAdapter(repo, executable=settings.GH_EXECUTABLE)
        run_create_branch_workflow(config, github, git, TerminalPrompter())
    except GhBuddyError as exc:
        raise _fail(exc) from exc


@typer_app.command(name="create-pr")
def create_pull_request_cli(
    ctx: typer.Context,
    issue: Annotated[str | None, Option("--issue", "-i", help="Issue number to link the PR to.")] = None,
    base: Annotated[str | None, Option("--base", "-b", help="Base branch for the PR (default: repo default branch).")] = None,
    title: Annotated[str | None, Option("--title", "-T", help="PR title (default: generated from issue or branch).")] = None,
    body: Annotated[str | None, Option("--body", help="PR body.")] = None,
    draft: Annotated[bool, Option("--draft", "-d", help="Create as a draft PR.")] = False,
    labels: Annotated[list[str] | None, Option("--label", "-l", help="Label to add to the PR (repeatable).")] = None,
    yes: Annotated[bool, Option("--yes", "-y", help="Use the default proposed fields without prompting.")] = False,
) -> None:
    """Create a pull request from the current local branch.

    The linked issue is detected from the branch name unless --issue is given,
    and the PR body closes it with "Closes #N".
    """
    try:
        config = CreatePullRequestConfig(
            assume_yes=yes or ctx.obj["assume_yes"],
            debug=ctx.obj["debug"],
            remote=settings.GH_BUDDY_REMOTE,
            fallback_base_branch=settings.GH_BUDDY_FALLBACK_BASE_BRANCH,
            issue_number=normalize_issue_number(issue),
            base_branch=base,
            title=title,
            body=body,
            draft=draft,
            labels=labels or [],
        )
        git = GitAdapter(executable=settings.GIT_EXECUTABLE)
        repo = resolve_repository(git, config.remote)
        github = GitHubCLIAdapter(repo, executable=settings.GH_EXECUTABLE)
        run_create_pull_request_workflow(config, github, git, TerminalPrompter())
    except GhBuddyError as exc:
        raise _fail(exc) from exc


if __name__ == "__main__":
    typer_app()
