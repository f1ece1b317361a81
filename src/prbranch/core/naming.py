"""Naming utilities for pull request branches and their config keys.

This module provides pure functions for turning pull request titles into
branch names and for mapping branch names onto the git config namespace used
to remember which pull request a local branch was created from. All functions
are pure (no I/O).
"""

import re

# Config subsection suffix identifying prbranch's own branch mappings,
# e.g. `branch.pr.42-fix-bug.prbranch-pr = 42`.
PR_CONFIG_MARKER = "prbranch-pr"

_INVALID_BRANCH_CHARS = re.compile(r"[^0-9A-Za-z-]")


def safe_branch_name(title: str) -> str:
    """Sanitize an arbitrary title into a branch name component.

    - Replaces every character outside `[0-9A-Za-z-]` with `-`
    - Collapses runs of `-` (repeating until nothing changes)
    - Strips leading/trailing `-`
    - Lowercases the result

    Only ASCII characters survive the first step, so lowercasing does not
    depend on the current locale. The function is idempotent.

    Examples:
        >>> safe_branch_name("Fix Bug #123!!")
        'fix-bug-123'
        >>> safe_branch_name("Ünïcode--Title")
        'n-code-title'
    """
    before = _INVALID_BRANCH_CHARS.sub("-", title)
    while True:
        after = before.replace("--", "-")
        if after == before:
            break
        before = after
    return before.strip("-").lower()


def default_local_branch_name(pr_number: int, pr_title: str) -> str:
    """Return the default local branch name for a pull request.

    Examples:
        >>> default_local_branch_name(42, "Fix Bug")
        'pr/42-fix-bug'
    """
    return f"pr/{pr_number}-{safe_branch_name(pr_title)}"


def branch_name_to_config_key(branch: str) -> str:
    """Encode a branch name as a git config subsection (`/` becomes `.`)."""
    return branch.replace("/", ".")


def config_key_to_branch_name(key: str) -> str:
    """Decode a git config subsection back into a branch name (`.` becomes `/`).

    Note: branch names that contain a literal `.` do not survive the round trip.
    """
    return key.replace(".", "/")


def pr_config_key(branch: str) -> str:
    """Return the git config key that records the pull request for `branch`.

    Examples:
        >>> pr_config_key("pr/99-x")
        'branch.pr.99-x.prbranch-pr'
    """
    return f"branch.{branch_name_to_config_key(branch)}.{PR_CONFIG_MARKER}"
