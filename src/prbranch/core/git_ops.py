"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
pull request workflow testable without a real repository.

Architecture:
- GitOps: Abstract base class defining the interface
- RealGitOps: Production implementation using subprocess
"""

import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from prbranch.core.errors import (
    CheckoutError,
    ConfigWriteError,
    FetchError,
    PrBranchError,
    PushError,
    TrackingError,
)
from prbranch.core.subprocess import run_subprocess_with_context


@dataclass(frozen=True)
class RemoteInfo:
    """A configured git remote."""

    name: str
    url: str


def is_http_url(url: str) -> bool:
    """Return True if the URL uses the HTTP(S) transport. The scheme is case-insensitive."""
    scheme = url.partition("://")[0].lower()
    return scheme in ("http", "https") and "://" in url


def parse_config_list(output: str) -> list[tuple[str, str]]:
    """Parse the output of `git config --null --list`.

    Entries are NUL-terminated; within an entry the key is separated from the
    value by the first newline. Keys without a value (boolean shorthand)
    get an empty string.

    Example:
        >>> parse_config_list("core.bare\\nfalse\\0branch.pr.7.prbranch-pr\\n7\\0")
        [('core.bare', 'false'), ('branch.pr.7.prbranch-pr', '7')]
    """
    entries: list[tuple[str, str]] = []
    for raw in output.split("\0"):
        if not raw:
            continue
        key, _, value = raw.partition("\n")
        entries.append((key, value))
    return entries


# ============================================================================
# Abstract Interface
# ============================================================================


class GitOps(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def get_repository_root(self, path: Path) -> Path | None:
        """Get the root of the repository containing `path`.

        Returns:
            Repository root, or None if `path` is not inside a git repository
        """
        ...

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch, or None when HEAD is detached."""
        ...

    @abstractmethod
    def fetch(self, repo_root: Path, remote: str, refspecs: list[str]) -> None:
        """Fetch refspecs from a remote.

        Fetching into the currently checked-out branch is allowed.

        Args:
            repo_root: Path to the repository root
            remote: Remote name (e.g., "origin")
            refspecs: Refspecs to fetch (e.g., ["+refs/pull/7/head:pr/7-fix"])

        Raises:
            FetchError: If the ref does not exist or the transport fails
        """
        ...

    @abstractmethod
    def checkout_branch(self, repo_root: Path, branch: str) -> None:
        """Checkout a branch in the repository.

        Raises:
            CheckoutError: If local changes conflict or the branch is missing
        """
        ...

    @abstractmethod
    def push(self, repo_root: Path, branch: str, remote: str) -> None:
        """Push a local branch to the branch of the same name on a remote.

        Raises:
            PushError: On auth, network or non-fast-forward failures
        """
        ...

    @abstractmethod
    def get_http_remote(self, repo_root: Path, name: str) -> RemoteInfo | None:
        """Get the named remote if it is reachable over HTTP(S).

        Returns:
            RemoteInfo, or None if no such remote exists or it uses another transport
        """
        ...

    @abstractmethod
    def branch_has_upstream(self, repo_root: Path, branch: str) -> bool:
        """Check whether a local branch tracks a remote branch."""
        ...

    @abstractmethod
    def set_tracking_branch(self, repo_root: Path, branch: str, remote: str) -> None:
        """Make `branch` track the branch of the same name on `remote`.

        Raises:
            TrackingError: If the upstream cannot be configured
        """
        ...

    @abstractmethod
    def set_config_value(self, repo_root: Path, key: str, value: str) -> None:
        """Write a value to the repository-local git config.

        Raises:
            ConfigWriteError: If the config file cannot be written
        """
        ...

    @abstractmethod
    def read_config_entries(self, repo_root: Path) -> list[tuple[str, str]]:
        """Read every (key, value) pair from the repository-local git config.

        Pairs are returned in the order git enumerates them.
        """
        ...


# ============================================================================
# Production Implementation
# ============================================================================


class RealGitOps(GitOps):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def get_repository_root(self, path: Path) -> Path | None:
        if not path.is_dir():
            return None

        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=path,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None

        return Path(result.stdout.strip())

    def get_current_branch(self, cwd: Path) -> str | None:
        result = subprocess.run(
            ["git", "rev-parse", "--abbrev-ref", "HEAD"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None

        branch = result.stdout.strip()
        if branch == "HEAD":
            return None

        return branch

    def fetch(self, repo_root: Path, remote: str, refspecs: list[str]) -> None:
        run_subprocess_with_context(
            ["git", "fetch", "--update-head-ok", remote, *refspecs],
            operation_context=f"fetch {' '.join(refspecs)} from remote '{remote}'",
            cwd=repo_root,
            error_type=FetchError,
        )

    def checkout_branch(self, repo_root: Path, branch: str) -> None:
        run_subprocess_with_context(
            ["git", "checkout", branch],
            operation_context=f"checkout branch '{branch}'",
            cwd=repo_root,
            error_type=CheckoutError,
        )

    def push(self, repo_root: Path, branch: str, remote: str) -> None:
        run_subprocess_with_context(
            ["git", "push", remote, branch],
            operation_context=f"push branch '{branch}' to remote '{remote}'",
            cwd=repo_root,
            error_type=PushError,
        )

    def get_http_remote(self, repo_root: Path, name: str) -> RemoteInfo | None:
        result = subprocess.run(
            ["git", "remote", "get-url", name],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None

        url = result.stdout.strip()
        if not is_http_url(url):
            return None

        return RemoteInfo(name=name, url=url)

    def branch_has_upstream(self, repo_root: Path, branch: str) -> bool:
        result = subprocess.run(
            ["git", "rev-parse", "--abbrev-ref", "--symbolic-full-name", f"{branch}@{{upstream}}"],
            cwd=repo_root,
            capture_output=True,
            text=True,
            check=False,
        )
        return result.returncode == 0

    def set_tracking_branch(self, repo_root: Path, branch: str, remote: str) -> None:
        run_subprocess_with_context(
            ["git", "branch", f"--set-upstream-to={remote}/{branch}", branch],
            operation_context=f"set upstream of '{branch}' to '{remote}/{branch}'",
            cwd=repo_root,
            error_type=TrackingError,
        )

    def set_config_value(self, repo_root: Path, key: str, value: str) -> None:
        run_subprocess_with_context(
            ["git", "config", "--local", key, value],
            operation_context=f"set config '{key}'",
            cwd=repo_root,
            error_type=ConfigWriteError,
        )

    def read_config_entries(self, repo_root: Path) -> list[tuple[str, str]]:
        result = run_subprocess_with_context(
            ["git", "config", "--local", "--null", "--list"],
            operation_context="read repository config",
            cwd=repo_root,
            error_type=PrBranchError,
        )
        return parse_config_list(result.stdout)
