"""Base ABC for the repository gateway."""

from abc import ABC, abstractmethod

from gh_buddy.schemas.github import CreatedPullRequestModel, IssueModel, PullRequestModel


class RepositoryGatewayBase(ABC):
    """Base ABC for issue, pull request, label and user operations on a GitHub repository."""

    # Issues
    @abstractmethod
    def get_issue(self, issue_number: int) -> IssueModel:
        """Get a single issue by number."""
        pass

    @abstractmethod
    def list_assigned_open_issues(self) -> list[IssueModel]:
        """List open issues assigned to the authenticated user."""
        pass

    # Pull Requests
    @abstractmethod
    def create_pull_request(self, pull_request: PullRequestModel) -> CreatedPullRequestModel:
        """Create a pull request."""
        pass

    # Labels
    @abstractmethod
    def list_labels(self) -> list[str]:
        """List the names of the labels defined in the repository."""
        pass

    # Users
    @abstractmethod
    def get_current_username(self) -> str:
        """Get the login of the authenticated user."""
        pass
