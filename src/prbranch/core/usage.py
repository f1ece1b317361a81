"""Usage counting for prbranch operations.

Counts are kept in a small TOML file next to the global config. Recording a
count is fire-and-forget: a failure to update the file is logged and never
reaches the operation that triggered it.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

import tomlkit
from tomlkit.exceptions import TOMLKitError

logger = logging.getLogger(__name__)

UPSTREAM_PULL_REQUEST_COUNT = "upstream_pull_request_count"


class UsageTracker(ABC):
    """Abstract interface for usage counters."""

    @abstractmethod
    def increment_upstream_pull_request_count(self) -> None:
        """Record that a pull request was created. Must never raise."""
        ...


class RealUsageTracker(UsageTracker):
    """Production implementation that persists counters to ~/.prbranch/usage.toml."""

    def __init__(self, path: Path | None = None) -> None:
        """Initialize tracker.

        Args:
            path: Location of the counter file. Defaults to ~/.prbranch/usage.toml.
        """
        self._path = path if path is not None else Path.home() / ".prbranch" / "usage.toml"

    @property
    def path(self) -> Path:
        return self._path

    def increment_upstream_pull_request_count(self) -> None:
        """Increment the counter file.

        Note: Uses try/except as an acceptable error boundary. Telemetry must
        not fail the pull request that was just created.
        """
        try:
            self._increment(UPSTREAM_PULL_REQUEST_COUNT)
        except (OSError, TOMLKitError, TypeError, ValueError) as e:
            logger.warning("Could not record usage in %s: %s", self._path, e)

    def _increment(self, key: str) -> None:
        if self._path.exists():
            with self._path.open("r", encoding="utf-8") as f:
                doc = tomlkit.load(f)
        else:
            doc = tomlkit.document()

        current = doc.get(key, 0)
        doc[key] = int(current) + 1

        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as f:
            tomlkit.dump(doc, f)
