"""Infers the branch type of an issue from its labels."""

from typing import Iterable

import structlog

from gh_buddy.branch.types import IssueType
from gh_buddy.schemas.github import LabelModel

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

# Checked in order for every label; the first label with any match wins.
LABEL_KEYWORD_RULES: tuple[tuple[tuple[str, ...], IssueType], ...] = (
    (("bug", "fix"), IssueType.BUGFIX),
    (("feature", "enhancement"), IssueType.FEATURE),
    (("hotfix", "urgent", "critical"), IssueType.HOTFIX),
    (("docs", "documentation"), IssueType.DOCS),
    (("refactor",), IssueType.REFACTOR),
    (("test",), IssueType.TEST),
    (("chore", "maintenance"), IssueType.CHORE),
)


def label_matches_keyword(label: str, keyword: str) -> bool:
    """Return True if the label equals, starts with, or ends with the keyword (case-insensitive).

    This is not a substring search: 'documentation-needed' matches
    'documentation' but 'needs-documentation-review' does not.
    """
    label = label.lower()
    return label == keyword or label.startswith(keyword) or label.endswith(keyword)


def infer_issue_type(labels: Iterable[LabelModel | str]) -> IssueType | None:
    """Infer the issue type from an ordered collection of labels.

    Returns None when no label matches, leaving the fallback to the caller.
    """
    for label in labels:
        name = label if isinstance(label, str) else label.name
        for keywords, issue_type in LABEL_KEYWORD_RULES:
            if any(label_matches_keyword(name, keyword) for keyword in keywords):
                logger.debug("Inferred issue type from label", label=name, issue_type=issue_type.value)
                return issue_type
    return None
