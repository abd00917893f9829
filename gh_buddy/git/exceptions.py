"""Contains exceptions raised by the version control gateway."""

from gh_buddy.exceptions import GhBuddyError


class GitCommandError(GhBuddyError):
    """Raised when a git command fails."""

    pass
