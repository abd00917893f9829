"""Orchestrates the create-pr command: current branch -> linked issue -> pull request."""

import structlog
import typer

from gh_buddy.branch.naming import extract_issue_number, title_from_branch
from gh_buddy.configuration.models import CreatePullRequestConfig
from gh_buddy.git.abc import VersionControlGatewayBase
from gh_buddy.git.exceptions import GitCommandError
from gh_buddy.github.abc import RepositoryGatewayBase
from gh_buddy.github.exceptions import GitHubCLIError
from gh_buddy.prompt.terminal import TerminalPrompter
from gh_buddy.pull_requests.body import compose_pull_request_body
from gh_buddy.schemas.github import CreatedPullRequestModel, IssueModel, PullRequestModel
from gh_buddy.workflows.common import resolve_base_branch, warn_if_uncommitted_changes

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def fetch_linked_issue(issue_number: int | None, github: RepositoryGatewayBase) -> IssueModel | None:
    """Fetch the issue the pull request resolves; failures only produce a warning."""
    if issue_number is None:
        return None
    try:
        issue = github.get_issue(issue_number)
    except GitHubCLIError as exc:
        logger.warning("Could not fetch linked issue", issue_number=issue_number, error=str(exc))
        typer.echo(f"⚠️  Could not fetch issue #{issue_number}: {exc}", err=True)
        return None
    typer.echo(f"📋 Linked issue #{issue.number}: {issue.title}")
    return issue


def warn_about_unknown_labels(labels: list[str], github: RepositoryGatewayBase) -> None:
    """Warn about requested labels that do not exist in the repository."""
    if not labels:
        return
    try:
        known_labels = set(github.list_labels())
    except GitHubCLIError as exc:
        logger.debug("Could not list repository labels", error=str(exc))
        return
    unknown = [label for label in labels if label not in known_labels]
    if unknown:
        typer.echo(f"⚠️  Labels not found in the repository: {', '.join(unknown)}", err=True)


def run_create_pull_request_workflow(
    config: CreatePullRequestConfig,
    github: RepositoryGatewayBase,
    git: VersionControlGatewayBase,
    prompter: TerminalPrompter,
) -> CreatedPullRequestModel | None:
    """Run the create-pr workflow.

    Returns the created pull request, or None if the user cancelled.
    """
    current_branch = git.get_current_branch()
    typer.echo(f"🌿 Current branch: {current_branch}")

    issue_number = config.issue_number
    if issue_number is None:
        issue_number = extract_issue_number(current_branch)
    issue = fetch_linked_issue(issue_number, github)

    base_branch = resolve_base_branch(config.base_branch, config, git, prompter)

    title = config.title
    if not title:
        title = issue.title if issue is not None else title_from_branch(current_branch)
        if not config.assume_yes:
            title = prompter.input("PR title", title)

    body = config.body
    if not body:
        body = compose_pull_request_body(issue)
        if not config.assume_yes:
            typer.echo("\n--- PR body preview ---")
            typer.echo(body)
            typer.echo("--- end preview ---\n")
            if not prompter.confirm("Use this PR body?", default=True):
                body = prompter.input("PR body")

    draft = config.draft
    if not config.assume_yes and not draft:
        draft = prompter.confirm("Create as draft?", default=False)

    warn_about_unknown_labels(config.labels, github)
    warn_if_uncommitted_changes(git, "You have uncommitted changes; they will not be part of the pull request.")

    typer.echo(f"\n📝 Creating PR: {title}")
    typer.echo(f"   {current_branch} → {base_branch}")
    if draft:
        typer.echo("   📌 Draft PR")

    if not config.assume_yes and not prompter.confirm("Proceed?", default=True):
        typer.echo("Cancelled.")
        return None

    typer.echo(f"🚀 Pushing branch to {config.remote}...")
    try:
        git.push_branch(config.remote, current_branch)
    except GitCommandError as exc:
        # The branch may already be pushed
        logger.warning("Push failed, continuing", branch=current_branch, remote=config.remote, error=str(exc))
        typer.echo(f"⚠️  Push warning: {exc} (continuing anyway)", err=True)

    pull_request = github.create_pull_request(
        PullRequestModel(
            title=title,
            body=body,
            base=base_branch,
            head=current_branch,
            draft=draft,
            labels=config.labels,
        )
    )
    typer.echo(f"✅ Pull request created: {pull_request.url}")
    return pull_request
