"""Contains exceptions raised while prompting the user."""

from gh_buddy.exceptions import GhBuddyError


class InvalidSelectionError(GhBuddyError):
    """Raised when the user picks an option that is not in the list."""

    def __init__(self, selection: str) -> None:
        """Initializes the exception with the raw selection the user typed."""
        super().__init__(f"invalid selection: {selection}")
        self.selection = selection
