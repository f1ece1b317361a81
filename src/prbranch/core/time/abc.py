"""Time operations abstraction for testing.

This module provides an ABC for time operations (sleep) so that the delay
between pushing a branch and creating its pull request can be observed in
tests without actually sleeping.
"""

from abc import ABC, abstractmethod


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """Sleep for specified number of seconds.

        Args:
            seconds: Number of seconds to sleep
        """
        ...
