"""Composes the Markdown body of a pull request."""

from gh_buddy.schemas.github import IssueModel
from gh_buddy.utils.constants import PULL_REQUEST_BODY_DEFAULT_TEMPLATE, PULL_REQUEST_BODY_WITH_ISSUE_TEMPLATE
from gh_buddy.utils.templates import construct_packaged_template, render_template_with_model


def compose_pull_request_body(issue: IssueModel | None) -> str:
    """Compose a pull request body, linked to the issue when one is given.

    A linked body always ends with 'Closes #<number>' so GitHub closes the
    issue when the pull request merges. Without an issue, the body is a
    description placeholder followed by an unchecked checklist.
    """
    if issue is None:
        return construct_packaged_template(PULL_REQUEST_BODY_DEFAULT_TEMPLATE).render()
    return render_template_with_model(model=issue, template=construct_packaged_template(PULL_REQUEST_BODY_WITH_ISSUE_TEMPLATE))
