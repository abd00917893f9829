"""Unit tests for validating user supplied configuration values."""

import pytest

from gh_buddy.branch.types import IssueType
from gh_buddy.configuration.exceptions import InvalidIssueNumberError, InvalidIssueTypeError
from gh_buddy.configuration.reconcile import normalize_issue_number, parse_issue_number, validate_issue_type


@pytest.mark.parametrize("value", ["feature", "bugfix", "hotfix", "release", "chore", "docs", "refactor", "test", "internal"])
def test_validate_issue_type_valid(value: str) -> None:
    """Test that every known issue type is accepted."""
    assert validate_issue_type(value) == IssueType(value)


def test_validate_issue_type_passes_enum_through() -> None:
    """Test that an IssueType is returned unchanged."""
    assert validate_issue_type(IssueType.DOCS) is IssueType.DOCS


@pytest.mark.parametrize("value", ["Feature", "feat", "bug", "", " feature"])
def test_validate_issue_type_invalid(value: str) -> None:
    """Test that anything other than an exact issue type is rejected."""
    with pytest.raises(InvalidIssueTypeError, match="invalid branch type") as exc_info:
        validate_issue_type(value)
    assert "feature, bugfix, hotfix" in str(exc_info.value)


@pytest.mark.parametrize("value,expected", [("42", 42), (" 7 ", 7), ("1", 1)])
def test_parse_issue_number_valid(value: str, expected: int) -> None:
    """Test parsing issue numbers typed by the user."""
    assert parse_issue_number(value) == expected


@pytest.mark.parametrize(
    "value",
    [
        "",
        "abc",
        "#42",
        "4.2",
        "0",
        "-3",
        "+3",
        pytest.param("1_0", id="underscore separator"),
        pytest.param("٤٢", id="non-ascii digits"),
    ],
)
def test_parse_issue_number_invalid(value: str) -> None:
    """Test that non-numeric or non-positive input is rejected."""
    with pytest.raises(InvalidIssueNumberError, match="invalid issue number"):
        parse_issue_number(value)


@pytest.mark.parametrize("value,expected", [(None, None), ("0", None), ("00", None), ("12", 12), (" 12 ", 12)])
def test_normalize_issue_number(value: str | None, expected: int | None) -> None:
    """Test that a missing or zero --issue means no issue."""
    assert normalize_issue_number(value) == expected


@pytest.mark.parametrize("value", ["-1", "abc", "1_0"])
def test_normalize_issue_number_invalid(value: str) -> None:
    """Test that a negative or non-numeric --issue is rejected."""
    with pytest.raises(InvalidIssueNumberError, match=f"invalid issue number: {value}"):
        normalize_issue_number(value)
