"""Base ABC for the version control gateway."""

from abc import ABC, abstractmethod


class VersionControlGatewayBase(ABC):
    """Base ABC for local git repository operations."""

    # Branches
    @abstractmethod
    def get_current_branch(self) -> str:
        """Get the name of the checked out branch."""
        pass

    @abstractmethod
    def create_and_checkout_branch(self, branch_name: str) -> None:
        """Create a branch from HEAD and check it out."""
        pass

    @abstractmethod
    def create_branch_from(self, branch_name: str, base_branch: str, remote: str) -> None:
        """Fetch the remote, then create a branch from its copy of the base branch and check it out."""
        pass

    @abstractmethod
    def get_default_branch(self, remote: str) -> str:
        """Get the default branch of the remote."""
        pass

    # Remotes
    @abstractmethod
    def fetch(self, remote: str) -> None:
        """Fetch the latest changes from a remote."""
        pass

    @abstractmethod
    def push_branch(self, remote: str, branch_name: str) -> None:
        """Push a branch to a remote and set it as upstream."""
        pass

    @abstractmethod
    def get_repo_slug(self, remote: str) -> str:
        """Get the 'owner/repo' slug of a remote."""
        pass

    # Working tree
    @abstractmethod
    def has_uncommitted_changes(self) -> bool:
        """Return True if the working tree has uncommitted changes."""
        pass
