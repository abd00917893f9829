"""Pydantic schemas for the GitHub objects exchanged with the gh CLI."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class LabelModel(BaseModel):
    """Pydantic model for a GitHub label."""

    model_config = ConfigDict(frozen=True)

    name: str


class IssueModel(BaseModel):
    """Pydantic model for a GitHub issue.

    Accepts both the REST payload from ``gh api`` (``html_url``) and the
    output of ``gh issue list --json`` (``url``).
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(gt=0)
    title: str
    body: str = ""
    labels: list[LabelModel] = Field(default_factory=list)
    state: str = ""
    url: str = Field(default="", validation_alias=AliasChoices("html_url", "url"))

    @field_validator("body", mode="before")
    @classmethod
    def null_body_is_empty(cls, value: str | None) -> str:
        """GitHub returns a null body for issues created without a description."""
        return value or ""

    @property
    def label_names(self) -> list[str]:
        """Names of the issue's labels, in order."""
        return [label.name for label in self.labels]


class PullRequestModel(BaseModel):
    """Pydantic model for a pull request about to be created."""

    title: str
    body: str
    base: str
    head: str
    draft: bool = False
    labels: list[str] = Field(default_factory=list)


class CreatedPullRequestModel(BaseModel):
    """Pydantic model for a pull request returned by ``gh pr create``."""

    number: int = 0
    url: str
    title: str
