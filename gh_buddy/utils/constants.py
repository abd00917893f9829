"""Shared constants used across the application."""

import re

# Branch Naming Constants
# -----------------------

MAX_SLUG_LENGTH = 60
"""Maximum length of the slug portion of a branch name."""

NON_ALPHANUMERIC_PATTERN = re.compile(r"[^a-zA-Z0-9]+")
"""Pattern matching runs of characters that are not ASCII letters or digits."""

ISSUE_NUMBER_INPUT_PATTERN = re.compile(r"[0-9]+")
"""Pattern an issue number typed by the user must fully match (ASCII digits only)."""

BRANCH_ISSUE_NUMBER_PATTERN = re.compile(r"/GH-([0-9]+)-")
"""Pattern to find the issue reference embedded in a branch name (e.g. feature/GH-42-title)."""

BRANCH_ISSUE_PREFIX_PATTERN = re.compile(r"^(?:GH-)?[0-9]+-")
"""Pattern matching a leading issue reference once the type prefix is removed."""

# Git Defaults
# ------------

DEFAULT_REMOTE = "origin"
"""Remote used for fetching, pushing and resolving the repository slug."""

FALLBACK_BASE_BRANCH = "main"
"""Base branch used when the remote's default branch cannot be determined."""

DEFAULT_BRANCH_CANDIDATES = ("main", "master")
"""Branch names probed on the remote when its HEAD reference is not set."""

# Pull Request Body Templates
# ---------------------------

PULL_REQUEST_BODY_WITH_ISSUE_TEMPLATE = "pr_body_issue.j2"
"""Template for pull requests linked to an issue."""

PULL_REQUEST_BODY_DEFAULT_TEMPLATE = "pr_body_default.j2"
"""Template for pull requests without a linked issue."""
