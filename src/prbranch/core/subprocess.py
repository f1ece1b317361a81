"""Subprocess execution with rich error context.

Used by the integration layer (git and gh wrappers) so that every failure
surfaces as a typed error carrying the operation, the command and its output.
"""

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from prbranch.core.errors import PrBranchError


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    error_type: type[PrBranchError] = PrBranchError,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess with enriched error reporting for integration layer.

    Wraps subprocess.run() to catch CalledProcessError and re-raise as
    ``error_type`` with operation context, stderr output, and command details.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        cwd: Working directory for command execution
        error_type: PrBranchError subclass raised on failure
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        error_type: If command fails or the binary is not found
    """
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
            **kwargs,
        )

    except subprocess.CalledProcessError as e:
        raise error_type(format_process_error(cmd, operation_context, e)) from e

    except FileNotFoundError as e:
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        raise error_type(error_msg) from e


def format_process_error(
    cmd: Sequence[str], operation_context: str, e: subprocess.CalledProcessError
) -> str:
    """Build the multi-line failure message for a failed command."""
    cmd_str = " ".join(str(arg) for arg in cmd)
    error_msg = f"Failed to {operation_context}"
    error_msg += f"\nCommand: {cmd_str}"
    error_msg += f"\nExit code: {e.returncode}"

    if e.stdout:
        stdout_text = e.stdout if isinstance(e.stdout, str) else e.stdout.decode("utf-8")
        stdout_stripped = stdout_text.strip()
        if stdout_stripped:
            error_msg += f"\nstdout: {stdout_stripped}"

    if e.stderr:
        stderr_text = e.stderr if isinstance(e.stderr, str) else e.stderr.decode("utf-8")
        stderr_stripped = stderr_text.strip()
        if stderr_stripped:
            error_msg += f"\nstderr: {stderr_stripped}"

    return error_msg
