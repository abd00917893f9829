"""Contains exceptions raised when validating user supplied configuration."""

from gh_buddy.exceptions import GhBuddyError


class InvalidIssueTypeError(GhBuddyError):
    """Raised when a branch type is not one of the known issue types."""

    def __init__(self, value: str, valid_values: list[str]) -> None:
        """Initializes the exception with the rejected value and the accepted ones."""
        super().__init__(f"invalid branch type {value!r}. Valid types: {', '.join(valid_values)}")
        self.value = value
        self.valid_values = valid_values


class InvalidIssueNumberError(GhBuddyError):
    """Raised when an issue number entered by the user is not a positive integer."""

    def __init__(self, value: str) -> None:
        """Initializes the exception with the rejected input."""
        super().__init__(f"invalid issue number: {value}")
        self.value = value
