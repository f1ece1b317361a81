"""Pull request branch workflow.

Ties local branches to pull requests:

- fetch_and_checkout: fetch `refs/pull/<n>/head` into a local branch, check it
  out and record the association in git config
- switch_to_branch: check out a local branch previously associated with a PR
- create_pull_request: push a local branch, make it track its remote branch
  and open a pull request for it

Steps of an operation run strictly in order and stop at the first failure.
Nothing is rolled back: a failed checkout leaves the fetched branch behind and
a failed config write leaves the branch checked out without an association.
Running the same operation again is safe: the pull request head is force-fetched
into the local branch (even when it is the checked-out branch) and the
association is overwritten. Local commits on an adopted branch that are not
part of the pull request are discarded by a re-adopt.

Operations against one repository are not serialized here; callers must not
run them concurrently on the same working tree.
"""

import logging
from pathlib import Path

from prbranch.core.branch_registry import find_local_branches_for_pr
from prbranch.core.errors import (
    BranchNotFoundError,
    RemoteNotFoundError,
    RepositoryNotFoundError,
    TrackingError,
    ValidationError,
)
from prbranch.core.filesystem_ops import FileSystemOps
from prbranch.core.git_ops import GitOps, RemoteInfo
from prbranch.core.github_ops import GitHubOps, PullRequestInfo, RepositoryRef
from prbranch.core.naming import default_local_branch_name, pr_config_key
from prbranch.core.template import get_pull_request_template
from prbranch.core.time.abc import Time
from prbranch.core.usage import UsageTracker

logger = logging.getLogger(__name__)

DEFAULT_REMOTE = "origin"

# GitHub may not see a just-pushed branch yet when the PR is created right away
DEFAULT_PUSH_DELAY_SECONDS = 5.0


def _require_pr_number(pr_number: object) -> int:
    if isinstance(pr_number, bool) or not isinstance(pr_number, int) or pr_number <= 0:
        raise ValidationError(f"Pull request number must be a positive integer, got {pr_number!r}")
    return pr_number


def _require_name(value: object, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} must be a non-empty string, got {value!r}")
    return value


def _require_text(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string, got {value!r}")
    return value


def _require_repository(value: object, name: str) -> RepositoryRef:
    if not isinstance(value, RepositoryRef):
        raise ValidationError(f"{name} must be a RepositoryRef, got {value!r}")
    return value


class PullRequestService:
    """Orchestrates git and GitHub operations for pull request branches."""

    def __init__(
        self,
        *,
        git: GitOps,
        github: GitHubOps,
        fs: FileSystemOps,
        usage: UsageTracker,
        time: Time,
        remote: str = DEFAULT_REMOTE,
        push_delay_seconds: float = DEFAULT_PUSH_DELAY_SECONDS,
        in_test_runner: bool = False,
    ) -> None:
        """Create the service.

        Args:
            git: Git operations
            github: GitHub operations
            fs: File system access for template lookup
            usage: Usage counter, incremented once per created pull request
            time: Sleep provider for the delay between push and create
            remote: Remote to fetch pull request refs from and push to
            push_delay_seconds: Delay between push and create
            in_test_runner: Skip the push delay entirely
        """
        self._git = git
        self._github = github
        self._fs = fs
        self._usage = usage
        self._time = time
        self._remote = remote
        self._push_delay_seconds = push_delay_seconds
        self._in_test_runner = in_test_runner

    def _resolve_repository(self, repo_path: Path) -> Path:
        if not isinstance(repo_path, Path):
            raise ValidationError(f"Repository path must be a Path, got {repo_path!r}")
        repo_root = self._git.get_repository_root(repo_path)
        if repo_root is None:
            raise RepositoryNotFoundError(f"Not a git repository: {repo_path}")
        return repo_root

    def default_local_branch_name(self, pr_number: int, pr_title: str) -> str:
        """Return `pr/<number>-<safe title>`."""
        _require_pr_number(pr_number)
        _require_text(pr_title, "Pull request title")
        return default_local_branch_name(pr_number, pr_title)

    def get_pull_request_template(self, repo_path: Path) -> str | None:
        """Return the repository's pull request template, or None."""
        if not isinstance(repo_path, Path):
            raise ValidationError(f"Repository path must be a Path, got {repo_path!r}")
        return get_pull_request_template(self._fs, repo_path)

    def _require_publish_remote(self, repo_root: Path) -> RemoteInfo:
        remote = self._git.get_http_remote(repo_root, self._remote)
        if remote is None:
            raise RemoteNotFoundError(
                f"No remote named '{self._remote}' with an HTTP(S) URL in {repo_root}"
            )
        return remote

    def get_publish_remote(self, repo_path: Path) -> RemoteInfo:
        """Return the remote that pull request branches are pushed to.

        Raises:
            RemoteNotFoundError: The remote is missing or not reachable over HTTP(S)
        """
        return self._require_publish_remote(self._resolve_repository(repo_path))

    def get_local_branches(self, repo_path: Path, pr_number: int) -> list[str]:
        """List the local branches associated with a pull request."""
        _require_pr_number(pr_number)
        repo_root = self._resolve_repository(repo_path)
        return list(find_local_branches_for_pr(self._git, repo_root, pr_number))

    def fetch_and_checkout(self, repo_path: Path, pr_number: int, local_branch_name: str) -> None:
        """Fetch a pull request into `local_branch_name`, check it out and remember it.

        Raises:
            ValidationError: Invalid arguments or not a repository (nothing done)
            FetchError: The pull request ref could not be fetched
            CheckoutError: The branch could not be checked out (no mapping written)
            ConfigWriteError: The association could not be persisted
        """
        _require_pr_number(pr_number)
        _require_name(local_branch_name, "Local branch name")
        repo_root = self._resolve_repository(repo_path)
        config_key = pr_config_key(local_branch_name)

        # Forced so a re-adopt follows a rewritten pull request head
        refspec = f"+refs/pull/{pr_number}/head:{local_branch_name}"
        logger.debug("Fetching %s from %s in %s", refspec, self._remote, repo_root)
        self._git.fetch(repo_root, self._remote, [refspec])

        logger.debug("Checking out %s", local_branch_name)
        self._git.checkout_branch(repo_root, local_branch_name)

        logger.debug("Recording %s = %d", config_key, pr_number)
        self._git.set_config_value(repo_root, config_key, str(pr_number))

    def switch_to_branch(self, repo_path: Path, pr_number: int) -> str:
        """Check out a local branch associated with a pull request.

        When several branches are associated with the pull request, the first
        one found in config order is used.

        Returns:
            The branch that was checked out

        Raises:
            BranchNotFoundError: No local branch is associated (nothing checked out)
            CheckoutError: The branch could not be checked out
        """
        _require_pr_number(pr_number)
        repo_root = self._resolve_repository(repo_path)

        branch = next(find_local_branches_for_pr(self._git, repo_root, pr_number), None)
        if branch is None:
            raise BranchNotFoundError(pr_number)

        logger.debug("Switching to %s for pull request #%d", branch, pr_number)
        self._git.checkout_branch(repo_root, branch)
        return branch

    def create_pull_request(
        self,
        repo_path: Path,
        source_repo: RepositoryRef,
        target_repo: RepositoryRef,
        source_branch: str,
        target_branch: str,
        title: str,
        body: str,
    ) -> PullRequestInfo:
        """Push `source_branch` and open a pull request for it.

        Raises:
            ValidationError: Invalid arguments or not a repository (nothing done)
            RemoteNotFoundError: The remote is missing or not reachable over HTTP(S)
            PushError: The branch could not be pushed
            RemoteApiError: GitHub rejected the pull request
        """
        _require_repository(source_repo, "Source repository")
        _require_repository(target_repo, "Target repository")
        _require_name(source_branch, "Source branch")
        _require_name(target_branch, "Target branch")
        _require_text(title, "Title")
        _require_text(body, "Body")
        repo_root = self._resolve_repository(repo_path)

        remote = self._require_publish_remote(repo_root)

        logger.debug("Pushing %s to %s (%s)", source_branch, remote.name, remote.url)
        self._git.push(repo_root, source_branch, remote.name)

        if not self._git.branch_has_upstream(repo_root, source_branch):
            try:
                self._git.set_tracking_branch(repo_root, source_branch, remote.name)
            except TrackingError as e:
                # The push succeeded; a missing upstream does not block the PR
                logger.warning("Could not set upstream for %s: %s", source_branch, e)

        if not self._in_test_runner:
            logger.debug("Waiting %.1fs before creating pull request", self._push_delay_seconds)
            self._time.sleep(self._push_delay_seconds)

        pr = self._github.create_pr(
            repo_root,
            source_repo,
            target_repo,
            source_branch,
            target_branch,
            title,
            body,
        )
        logger.debug("Created pull request #%d at %s", pr.number, pr.url)

        try:
            self._usage.increment_upstream_pull_request_count()
        except Exception as e:
            # The pull request exists already; a counter failure must not hide that
            logger.warning("Could not record usage for pull request #%d: %s", pr.number, e)
        return pr
