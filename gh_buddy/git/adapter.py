"""Version control gateway backed by the git executable."""

from pathlib import Path

import structlog

from gh_buddy.git.abc import VersionControlGatewayBase
from gh_buddy.git.exceptions import GitCommandError
from gh_buddy.utils.commands import describe_failure, run_command
from gh_buddy.utils.constants import DEFAULT_BRANCH_CANDIDATES
from gh_buddy.utils.github import parse_repo_slug

logger = structlog.get_logger(__name__)


class GitAdapter(VersionControlGatewayBase):
    """Version control gateway that shells out to git in a working directory."""

    def __init__(self, executable: str = "git", cwd: Path | None = None) -> None:
        """Initialize the adapter; cwd defaults to the current directory."""
        self.executable = executable
        self.cwd = cwd

    def _run(self, args: list[str], failure_message: str) -> str:
        """Run a git command and return its stripped stdout, raising GitCommandError on failure."""
        result = run_command([self.executable, *args], cwd=self.cwd)
        if result.returncode != 0:
            logger.debug("git command failed", args=args, returncode=result.returncode, stderr=result.stderr.strip())
            raise GitCommandError(f"{failure_message}: {describe_failure(result)}")
        return result.stdout.strip()

    def _succeeds(self, args: list[str]) -> bool:
        """Run a git command and report only whether it succeeded."""
        return run_command([self.executable, *args], cwd=self.cwd).returncode == 0

    def get_current_branch(self) -> str:
        """Get the name of the checked out branch."""
        return self._run(["rev-parse", "--abbrev-ref", "HEAD"], failure_message="failed to get current branch")

    def create_and_checkout_branch(self, branch_name: str) -> None:
        """Create a branch from HEAD and check it out."""
        self._run(["checkout", "-b", branch_name], failure_message=f"failed to create branch {branch_name!r}")
        logger.info("Created branch", branch=branch_name)

    def fetch(self, remote: str) -> None:
        """Fetch the latest changes from a remote."""
        self._run(["fetch", remote], failure_message=f"failed to fetch from {remote!r}")

    def create_branch_from(self, branch_name: str, base_branch: str, remote: str) -> None:
        """Fetch the remote, then create a branch from its copy of the base branch and check it out."""
        self.fetch(remote)
        ref = f"{remote}/{base_branch}"
        self._run(["checkout", "-b", branch_name, ref], failure_message=f"failed to create branch {branch_name!r} from {ref!r}")
        logger.info("Created branch", branch=branch_name, ref=ref)

    def push_branch(self, remote: str, branch_name: str) -> None:
        """Push a branch to a remote and set it as upstream."""
        self._run(["push", "-u", remote, branch_name], failure_message=f"failed to push branch {branch_name!r} to {remote!r}")
        logger.info("Pushed branch", branch=branch_name, remote=remote)

    def get_default_branch(self, remote: str) -> str:
        """Get the default branch of the remote.

        Uses the remote's HEAD reference, falling back to the first of the
        common default branch names that exists on the remote.
        """
        try:
            reference = self._run(["symbolic-ref", f"refs/remotes/{remote}/HEAD", "--short"], failure_message="failed to read remote HEAD")
        except GitCommandError as exc:
            for candidate in DEFAULT_BRANCH_CANDIDATES:
                if self._succeeds(["rev-parse", "--verify", f"{remote}/{candidate}"]):
                    return candidate
            raise GitCommandError(f"failed to determine default branch: {exc}") from exc
        # Remove the remote prefix, e.g. "origin/main" -> "main"
        _, separator, branch = reference.partition("/")
        return branch if separator else reference

    def get_repo_slug(self, remote: str) -> str:
        """Get the 'owner/repo' slug of a remote."""
        remote_url = self._run(["remote", "get-url", remote], failure_message=f"failed to get {remote} remote URL")
        try:
            return parse_repo_slug(remote_url)
        except ValueError as exc:
            raise GitCommandError(str(exc)) from exc

    def has_uncommitted_changes(self) -> bool:
        """Return True if the working tree has uncommitted changes."""
        return bool(self._run(["status", "--porcelain"], failure_message="failed to check git status"))
