"""Base exception for errors that abort a gh-buddy command."""


class GhBuddyError(Exception):
    """Base class for errors reported to the user as ``Error: <message>``."""

    pass
