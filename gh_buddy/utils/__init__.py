"""Utility modules for shared functionality."""

from .constants import (
    BRANCH_ISSUE_NUMBER_PATTERN,
    BRANCH_ISSUE_PREFIX_PATTERN,
    DEFAULT_REMOTE,
    FALLBACK_BASE_BRANCH,
    MAX_SLUG_LENGTH,
)

__all__ = [
    "BRANCH_ISSUE_NUMBER_PATTERN",
    "BRANCH_ISSUE_PREFIX_PATTERN",
    "DEFAULT_REMOTE",
    "FALLBACK_BASE_BRANCH",
    "MAX_SLUG_LENGTH",
]
