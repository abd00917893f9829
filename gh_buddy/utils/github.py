"""Contains utility functions for GitHub repository identifiers."""


def split_repository(repo: str | None) -> tuple[str, str]:
    """Splits a repository slug into owner and repository."""
    if repo is None:
        raise ValueError("Repository is required.")
    repo = repo.strip("/")
    parts = repo.split("/")
    if len(parts) != 2 or not all(parts):
        raise ValueError("Repository must be in the format 'owner/repo' with no leading/trailing slashes or extra parts.")
    owner, repository = parts
    return owner, repository


def parse_repo_slug(remote_url: str) -> str:
    """Parse the 'owner/repo' slug out of a git remote URL.

    Supports SSH (git@github.com:owner/repo.git, ssh://git@github.com/owner/repo)
    and HTTP(S) (https://github.com/owner/repo.git) remotes.
    """
    url = remote_url.strip().removesuffix(".git")
    path: str | None = None

    if url.startswith("git@"):
        _, separator, remainder = url.partition(":")
        if separator:
            path = remainder

    for prefix in ("ssh://", "https://", "http://"):
        if url.startswith(prefix):
            # Remove host
            _, separator, remainder = url.removeprefix(prefix).partition("/")
            if separator:
                path = remainder

    if path is None:
        raise ValueError(f"unable to parse repo slug from URL: {remote_url}")
    try:
        owner, repository = split_repository(path)
    except ValueError as exc:
        raise ValueError(f"unable to parse repo slug from URL: {remote_url}") from exc
    return f"{owner}/{repository}"
