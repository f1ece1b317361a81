"""CLI error handling utilities with styled output.

All errors use a red "Error:" prefix and exit with status 1.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TypeVar

from prbranch.cli.output import error_output
from prbranch.core.errors import PrBranchError

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            error_output(error_message)
            raise SystemExit(1)

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Returns:
            The value unchanged if not None

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            error_output(error_message)
            raise SystemExit(1)
        return value


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Turn prbranch errors raised inside the block into a styled error and exit 1."""
    try:
        yield
    except PrBranchError as e:
        error_output(str(e))
        raise SystemExit(1) from e
