"""Branch name generation and parsing.

Branch names follow the format ``<type>/GH-<issue-number>-<slug>`` (or
``<type>/<slug>`` when there is no issue), and are parsed back later by
``create-pr`` to find the linked issue.
"""

from gh_buddy.branch.types import IssueType
from gh_buddy.utils.constants import (
    BRANCH_ISSUE_NUMBER_PATTERN,
    BRANCH_ISSUE_PREFIX_PATTERN,
    MAX_SLUG_LENGTH,
    NON_ALPHANUMERIC_PATTERN,
)


def _lower_char(char: str) -> str:
    # One character in, one out: 'İ' becomes 'i', not 'i' plus a combining dot
    return char.lower()[:1]


def _upper_char(char: str) -> str:
    # Characters without a single-character uppercase form ('ß') stay as they are
    upper = char.upper()
    return upper if len(upper) == 1 else char


def slugify_title(title: str, max_length: int = MAX_SLUG_LENGTH) -> str:
    """Slugify a title for use in branch names (lowercase, hyphens, alphanum only)."""
    lowered = "".join(_lower_char(char) for char in title)
    slug = NON_ALPHANUMERIC_PATTERN.sub("-", lowered)
    slug = slug.strip("-")
    if len(slug) > max_length:
        # Don't end on a hyphen
        slug = slug[:max_length].rstrip("-")
    return slug


def generate_branch_name(issue_type: IssueType, issue_number: int, title: str) -> str:
    """Generate a deterministic branch name like 'feature/GH-123-title-slug'.

    An issue number of zero means there is no issue, giving 'feature/title-slug'.
    """
    slug = slugify_title(title)
    if issue_number > 0:
        return f"{issue_type.value}/GH-{issue_number}-{slug}"
    return f"{issue_type.value}/{slug}"


def extract_issue_number(branch_name: str) -> int | None:
    """Return the issue number embedded in a branch name, or None if there isn't one."""
    match = BRANCH_ISSUE_NUMBER_PATTERN.search(branch_name)
    if match is None:
        return None
    return int(match.group(1))


def title_from_branch(branch_name: str) -> str:
    """Build a human readable title from a branch name.

    'feature/GH-42-add-login-page' becomes 'Add login page'.
    """
    _, separator, remainder = branch_name.partition("/")
    title = remainder if separator else branch_name
    title = BRANCH_ISSUE_PREFIX_PATTERN.sub("", title)
    title = title.replace("-", " ")
    if not title:
        return title
    return _upper_char(title[0]) + title[1:]
