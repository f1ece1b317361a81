"""Output utilities for CLI commands with clear intent.

- user_output: messages for the person at the terminal (stderr)
- machine_output: data meant to be piped or captured (stdout)
"""

from typing import Any

import click


def user_output(message: Any = "", *, nl: bool = True) -> None:
    click.echo(message, err=True, nl=nl)


def machine_output(message: Any = "", *, nl: bool = True) -> None:
    click.echo(message, nl=nl)


def error_output(message: str) -> None:
    """Print a red `Error:` prefixed message to stderr."""
    user_output(click.style("Error: ", fg="red") + message)
