"""Repository gateway backed by the GitHub CLI (gh)."""

import json
from typing import Any

import structlog
from pydantic import ValidationError

from gh_buddy.github.abc import RepositoryGatewayBase
from gh_buddy.github.exceptions import GitHubCLIError
from gh_buddy.schemas.github import CreatedPullRequestModel, IssueModel, PullRequestModel
from gh_buddy.utils.commands import describe_failure, run_command
from gh_buddy.utils.github import split_repository

logger = structlog.get_logger(__name__)

ISSUE_LIST_FIELDS = "number,title,body,labels,state,url"


class GitHubCLIAdapter(RepositoryGatewayBase):
    """Repository gateway that shells out to the gh CLI for a single repository."""

    def __init__(self, repo: str, executable: str = "gh") -> None:
        """Initialize the adapter for a repository in 'owner/repo' format."""
        self.owner, self.repo_name = split_repository(repo)
        self.executable = executable

    @property
    def repo(self) -> str:
        """The repository slug in 'owner/repo' format."""
        return f"{self.owner}/{self.repo_name}"

    def _run(self, args: list[str], failure_message: str) -> str:
        """Run a gh command and return its stdout, raising GitHubCLIError on failure."""
        result = run_command([self.executable, *args])
        if result.returncode != 0:
            logger.debug("gh command failed", args=args, returncode=result.returncode, stderr=result.stderr.strip())
            raise GitHubCLIError(f"{failure_message}: {describe_failure(result)}")
        return result.stdout

    def _run_json(self, args: list[str], failure_message: str, parse_message: str) -> Any:
        """Run a gh command and decode its JSON output."""
        output = self._run(args, failure_message)
        try:
            return json.loads(output)
        except json.JSONDecodeError as exc:
            raise GitHubCLIError(f"{parse_message}: {exc}") from exc

    def get_issue(self, issue_number: int) -> IssueModel:
        """Get a single issue by number."""
        data = self._run_json(
            ["api", f"repos/{self.repo}/issues/{issue_number}"],
            failure_message=f"failed to fetch issue #{issue_number}",
            parse_message=f"failed to parse issue #{issue_number}",
        )
        try:
            issue = IssueModel.model_validate(data)
        except ValidationError as exc:
            raise GitHubCLIError(f"failed to parse issue #{issue_number}: {exc}") from exc
        logger.info("Fetched issue", repo=self.repo, issue_number=issue.number, labels=issue.label_names)
        return issue

    def list_assigned_open_issues(self) -> list[IssueModel]:
        """List open issues assigned to the authenticated user."""
        data = self._run_json(
            ["issue", "list", "--repo", self.repo, "--assignee", "@me", "--state", "open", "--json", ISSUE_LIST_FIELDS],
            failure_message="failed to list issues",
            parse_message="failed to parse issues",
        )
        try:
            issues = [IssueModel.model_validate(item) for item in data]
        except (TypeError, ValidationError) as exc:
            raise GitHubCLIError(f"failed to parse issues: {exc}") from exc
        logger.info("Listed assigned open issues", repo=self.repo, issue_count=len(issues))
        return issues

    def create_pull_request(self, pull_request: PullRequestModel) -> CreatedPullRequestModel:
        """Create a pull request.

        gh prints the URL of the new pull request; its number is the last path segment.
        """
        args = [
            "pr",
            "create",
            "--repo",
            self.repo,
            "--title",
            pull_request.title,
            "--body",
            pull_request.body,
            "--base",
            pull_request.base,
            "--head",
            pull_request.head,
        ]
        if pull_request.draft:
            args.append("--draft")
        for label in pull_request.labels:
            args.extend(["--label", label])

        output = self._run(args, failure_message=f"failed to create PR from {pull_request.head} into {pull_request.base}")
        url = output.strip().splitlines()[-1].strip() if output.strip() else ""
        last_segment = url.rstrip("/").rsplit("/", 1)[-1]
        number = int(last_segment) if last_segment.isdigit() else 0
        logger.info("Created pull request", repo=self.repo, number=number, url=url, draft=pull_request.draft)
        return CreatedPullRequestModel(number=number, url=url, title=pull_request.title)

    def list_labels(self) -> list[str]:
        """List the names of the labels defined in the repository."""
        # One name per line, across every page
        output = self._run(["api", f"repos/{self.repo}/labels", "--paginate", "--jq", ".[].name"], failure_message="failed to list labels")
        return [line.strip() for line in output.splitlines() if line.strip()]

    def get_current_username(self) -> str:
        """Get the login of the authenticated user."""
        return self._run(["api", "user", "--jq", ".login"], failure_message="failed to get current user").strip()
