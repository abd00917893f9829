"""Orchestrates the create-branch command: issue -> branch name -> local branch -> push."""

import structlog
import typer

from gh_buddy.branch.classifier import infer_issue_type
from gh_buddy.branch.naming import generate_branch_name
from gh_buddy.branch.types import IssueType, all_issue_type_values
from gh_buddy.configuration.models import CreateBranchConfig
from gh_buddy.configuration.reconcile import validate_issue_type
from gh_buddy.git.abc import VersionControlGatewayBase
from gh_buddy.github.abc import RepositoryGatewayBase
from gh_buddy.prompt.terminal import TerminalPrompter
from gh_buddy.schemas.github import IssueModel
from gh_buddy.workflows.common import prompt_for_issue_number, resolve_base_branch, warn_if_uncommitted_changes

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def resolve_issue_type(config: CreateBranchConfig, issue: IssueModel, prompter: TerminalPrompter) -> IssueType:
    """Pick the branch type: explicit flag, then the issue's labels, then the user or the configured default."""
    if config.issue_type is not None:
        return config.issue_type

    inferred = infer_issue_type(issue.labels)
    if inferred is not None:
        return inferred

    if config.assume_yes:
        return config.default_issue_type

    types = all_issue_type_values()
    index = prompter.select("Select branch type:", types)
    return validate_issue_type(types[index])


def run_create_branch_workflow(
    config: CreateBranchConfig,
    github: RepositoryGatewayBase,
    git: VersionControlGatewayBase,
    prompter: TerminalPrompter,
) -> str:
    """Run the create-branch workflow and return the name of the created branch."""
    issue_number = config.issue_number
    if issue_number is None:
        issue_number = prompt_for_issue_number(github, prompter)

    issue = github.get_issue(issue_number)
    typer.echo(f"📋 Issue #{issue.number}: {issue.title}")

    issue_type = resolve_issue_type(config, issue, prompter)
    base_branch = resolve_base_branch(config.base_branch, config, git, prompter)

    branch_name = generate_branch_name(issue_type, issue_number, issue.title)
    if not config.assume_yes:
        branch_name = prompter.input("Branch name", branch_name)

    warn_if_uncommitted_changes(git, "You have uncommitted changes; they will be carried over to the new branch.")

    typer.echo(f"🌿 Creating branch: {branch_name} (from {base_branch})")
    logger.info("Creating branch", branch=branch_name, base=base_branch, issue_type=issue_type.value, issue_number=issue_number)
    git.create_branch_from(branch_name, base_branch, config.remote)
    typer.echo(f"✅ Branch {branch_name!r} created and checked out successfully!")

    if config.assume_yes or prompter.confirm(f"Push branch to {config.remote}?", default=True):
        git.push_branch(config.remote, branch_name)
        typer.echo(f"🚀 Branch pushed to {config.remote}")

    return branch_name
