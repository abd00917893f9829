"""Validates values supplied on the command line, in the environment or at prompts."""

from gh_buddy.branch.types import IssueType, all_issue_type_values, is_valid_issue_type
from gh_buddy.configuration.exceptions import InvalidIssueNumberError, InvalidIssueTypeError
from gh_buddy.utils.constants import ISSUE_NUMBER_INPUT_PATTERN


def validate_issue_type(value: str | IssueType) -> IssueType:
    """Validates a branch type against the known issue types.

    Args:
        value (str | IssueType): The branch type, e.g. "bugfix".

    Raises:
        InvalidIssueTypeError: If the value is not an exact match for an issue type.

    Returns:
        IssueType: The matching issue type.
    """
    if isinstance(value, IssueType):
        return value
    if not is_valid_issue_type(value):
        raise InvalidIssueTypeError(value, all_issue_type_values())
    return IssueType(value)


def parse_issue_number(value: str) -> int:
    """Parses an issue number typed by the user.

    Only ASCII digits are accepted; signs, underscores and other numerals are not.

    Raises:
        InvalidIssueNumberError: If the value is not a positive integer.
    """
    text = value.strip()
    if ISSUE_NUMBER_INPUT_PATTERN.fullmatch(text) is None:
        raise InvalidIssueNumberError(value)
    number = int(text)
    if number <= 0:
        raise InvalidIssueNumberError(value)
    return number


def normalize_issue_number(value: str | None) -> int | None:
    """Parse the --issue option, where a missing or zero issue number means no issue."""
    if value is None:
        return None
    text = value.strip()
    if ISSUE_NUMBER_INPUT_PATTERN.fullmatch(text) is not None and int(text) == 0:
        return None
    return parse_issue_number(value)
