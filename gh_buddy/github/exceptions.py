"""Contains exceptions raised by the repository gateway."""

from gh_buddy.exceptions import GhBuddyError


class GitHubCLIError(GhBuddyError):
    """Raised when a gh CLI call fails or returns output that cannot be parsed."""

    pass
