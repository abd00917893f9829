"""Configuration passed from the CLI into the command workflows."""

from dataclasses import dataclass, field

from gh_buddy.branch.types import IssueType


@dataclass
class BaseConfig:
    """Configuration shared by every command."""

    assume_yes: bool
    debug: bool
    remote: str
    fallback_base_branch: str


@dataclass
class CreateBranchConfig(BaseConfig):
    """Configuration class for the create-branch command."""

    default_issue_type: IssueType
    issue_number: int | None
    issue_type: IssueType | None
    base_branch: str | None


@dataclass
class CreatePullRequestConfig(BaseConfig):
    """Configuration class for the create-pr command."""

    issue_number: int | None
    base_branch: str | None
    title: str | None
    body: str | None
    draft: bool
    labels: list[str] = field(default_factory=list)
