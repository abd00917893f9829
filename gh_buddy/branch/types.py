"""Issue types used as branch name prefixes."""

from enum import Enum


class IssueType(str, Enum):
    """Enum for the branch types a branch name may start with."""

    FEATURE = "feature"
    BUGFIX = "bugfix"
    HOTFIX = "hotfix"
    RELEASE = "release"
    CHORE = "chore"
    DOCS = "docs"
    REFACTOR = "refactor"
    TEST = "test"
    INTERNAL = "internal"


def all_issue_type_values() -> list[str]:
    """Return every issue type value in declaration order."""
    return [issue_type.value for issue_type in IssueType]


def is_valid_issue_type(value: str) -> bool:
    """Return True if the value exactly matches one of the issue types."""
    return value in all_issue_type_values()
