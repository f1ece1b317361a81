"""High-level GitHub operations interface.

This module provides a clean abstraction over GitHub CLI (gh) calls, making the
pull request workflow testable.

Architecture:
- GitHubOps: Abstract base class defining the interface
- RealGitHubOps: Production implementation using gh CLI
"""

import json
import re
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from prbranch.core.errors import RemoteApiError
from prbranch.core.subprocess import format_process_error


@dataclass(frozen=True)
class RepositoryRef:
    """A repository on GitHub, identified by owner and name."""

    owner: str
    name: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class PullRequestInfo:
    """A pull request as returned by GitHub after creation."""

    number: int
    url: str
    title: str
    head_branch: str
    base_branch: str
    state: str  # "OPEN", "MERGED", "CLOSED"


def parse_github_remote_url(url: str) -> RepositoryRef | None:
    """Parse owner and repo from a GitHub remote URL.

    Accepts HTTPS (`https://github.com/owner/repo(.git)`) and SCP-style SSH
    (`git@github.com:owner/repo(.git)`) URLs.

    Example:
        >>> parse_github_remote_url("https://github.com/octo/hello.git")
        RepositoryRef(owner='octo', name='hello')
    """
    match = re.match(
        r"^(?i:https?://(?:[^@/]+@)?github\.com/|git@github\.com:)([^/]+)/([^/]+?)(?:\.git)?/?$",
        url.strip(),
    )
    if match is None:
        return None
    return RepositoryRef(owner=match.group(1), name=match.group(2))


def parse_pr_number_from_url(url: str) -> int | None:
    """Extract the pull request number from a GitHub pull request URL.

    Example:
        >>> parse_pr_number_from_url("https://github.com/octo/hello/pull/23")
        23
    """
    match = re.search(r"/pull/(\d+)\s*$", url)
    if match is None:
        return None
    return int(match.group(1))


def execute_gh_command(cmd: list[str], cwd: Path) -> str:
    """Execute a gh CLI command and return stdout.

    Args:
        cmd: Command and arguments to execute
        cwd: Working directory for command execution

    Returns:
        stdout from the command

    Raises:
        RemoteApiError: If the command fails or gh is not installed
    """
    try:
        result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, check=False)
    except FileNotFoundError as e:
        raise RemoteApiError(f"Command not found: {cmd[0]}") from e

    if result.returncode != 0:
        error = subprocess.CalledProcessError(
            result.returncode, cmd, output=result.stdout, stderr=result.stderr
        )
        raise RemoteApiError(format_process_error(cmd, "run GitHub CLI command", error)) from error

    return result.stdout


# ============================================================================
# Abstract Interface
# ============================================================================


class GitHubOps(ABC):
    """Abstract interface for GitHub operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def create_pr(
        self,
        repo_root: Path,
        source_repo: RepositoryRef,
        target_repo: RepositoryRef,
        source_branch: str,
        target_branch: str,
        title: str,
        body: str,
    ) -> PullRequestInfo:
        """Create a pull request from `source_repo:source_branch` into `target_repo:target_branch`.

        Args:
            repo_root: Repository root directory
            source_repo: Repository the pushed branch lives in (may be a fork)
            target_repo: Repository the pull request is opened against
            source_branch: Head branch of the pull request
            target_branch: Base branch of the pull request
            title: PR title
            body: PR body (markdown)

        Returns:
            The created pull request

        Raises:
            RemoteApiError: On validation, permission, duplicate-PR or network failures
        """
        ...

    @abstractmethod
    def get_pr_title(self, repo_root: Path, pr_number: int) -> str | None:
        """Get the title of a pull request.

        Returns:
            The title, or None if the pull request cannot be found
        """
        ...


# ============================================================================
# Production Implementation
# ============================================================================


class RealGitHubOps(GitHubOps):
    """Production implementation using gh CLI.

    All GitHub operations execute actual gh commands via subprocess.
    """

    def __init__(self, execute_fn: Callable[[list[str], Path], str] | None = None) -> None:
        """Initialize RealGitHubOps with optional command executor.

        Args:
            execute_fn: Optional function to execute commands (for testing).
                       If None, uses execute_gh_command.
        """
        self._execute = execute_fn or execute_gh_command

    def create_pr(
        self,
        repo_root: Path,
        source_repo: RepositoryRef,
        target_repo: RepositoryRef,
        source_branch: str,
        target_branch: str,
        title: str,
        body: str,
    ) -> PullRequestInfo:
        # Cross-repository pull requests name the head as owner:branch
        if source_repo == target_repo:
            head = source_branch
        else:
            head = f"{source_repo.owner}:{source_branch}"

        cmd = [
            "gh",
            "pr",
            "create",
            "--repo",
            target_repo.full_name,
            "--head",
            head,
            "--base",
            target_branch,
            "--title",
            title,
            "--body",
            body,
        ]
        stdout = self._execute(cmd, repo_root)

        # gh prints the URL of the new pull request as the last line
        lines = [line.strip() for line in stdout.strip().splitlines() if line.strip()]
        url = lines[-1] if lines else ""
        pr_number = parse_pr_number_from_url(url)
        if pr_number is None:
            raise RemoteApiError(f"Could not parse pull request URL from gh output: {stdout!r}")

        return PullRequestInfo(
            number=pr_number,
            url=url,
            title=title,
            head_branch=source_branch,
            base_branch=target_branch,
            state="OPEN",
        )

    def get_pr_title(self, repo_root: Path, pr_number: int) -> str | None:
        """Get the title of a pull request.

        Note: Uses try/except as an acceptable error boundary for handling gh CLI
        availability and authentication, as well as unknown PR numbers.
        """
        try:
            stdout = self._execute(
                ["gh", "pr", "view", str(pr_number), "--json", "title"], repo_root
            )
            data = json.loads(stdout)
        except (RemoteApiError, json.JSONDecodeError):
            return None

        title = data.get("title")
        if not isinstance(title, str):
            return None
        return title
