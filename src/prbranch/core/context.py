"""Application context with dependency injection."""

import os
from dataclasses import dataclass
from pathlib import Path

from prbranch.cli.config import LoadedConfig, default_config_dir, load_config
from prbranch.core.filesystem_ops import FileSystemOps, RealFileSystemOps
from prbranch.core.git_ops import GitOps, RealGitOps
from prbranch.core.github_ops import GitHubOps, RealGitHubOps
from prbranch.core.pull_request_service import PullRequestService
from prbranch.core.time.abc import Time
from prbranch.core.time.real import RealTime
from prbranch.core.usage import RealUsageTracker, UsageTracker


@dataclass(frozen=True)
class PrBranchContext:
    """Immutable context holding all dependencies for prbranch operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: GitOps
    github: GitHubOps
    fs: FileSystemOps
    usage: UsageTracker
    time: Time
    cwd: Path  # Current working directory at CLI invocation
    config: LoadedConfig
    in_test_runner: bool

    @property
    def pull_requests(self) -> PullRequestService:
        """Pull request workflow wired to this context's integrations."""
        return PullRequestService(
            git=self.git,
            github=self.github,
            fs=self.fs,
            usage=self.usage,
            time=self.time,
            remote=self.config.remote,
            push_delay_seconds=self.config.push_delay_seconds,
            in_test_runner=self.in_test_runner,
        )


def detect_test_runner() -> bool:
    """Return True when running under pytest."""
    return "PYTEST_CURRENT_TEST" in os.environ


def create_context(*, config_dir: Path | None = None) -> PrBranchContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        config_dir: Directory holding config.toml and usage.toml.
                    Defaults to ~/.prbranch.

    Example:
        >>> ctx = create_context()
        >>> ctx.pull_requests.get_local_branches(ctx.cwd, 42)
    """
    resolved_dir = config_dir if config_dir is not None else default_config_dir()

    return PrBranchContext(
        git=RealGitOps(),
        github=RealGitHubOps(),
        fs=RealFileSystemOps(),
        usage=RealUsageTracker(resolved_dir / "usage.toml"),
        time=RealTime(),
        cwd=Path.cwd(),
        config=load_config(resolved_dir),
        in_test_runner=detect_test_runner(),
    )
