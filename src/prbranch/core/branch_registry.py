"""Lookup of local branches associated with a pull request.

Associations live in the repository-local git config as
`branch.<encoded-branch>.prbranch-pr = <number>` (see prbranch.core.naming).
"""

from collections.abc import Iterator
from pathlib import Path

from prbranch.core.git_ops import GitOps
from prbranch.core.naming import PR_CONFIG_MARKER, config_key_to_branch_name

_KEY_PREFIX = "branch."
_KEY_SUFFIX = f".{PR_CONFIG_MARKER}"


def extract_branch_segment(key: str) -> str | None:
    """Return the encoded branch segment of a mapping key, or None if `key` is not one.

    Examples:
        >>> extract_branch_segment("branch.pr.7.prbranch-pr")
        'pr.7'
        >>> extract_branch_segment("branch.main.remote") is None
        True
    """
    if not key.startswith(_KEY_PREFIX) or not key.endswith(_KEY_SUFFIX):
        return None
    if len(key) <= len(_KEY_PREFIX) + len(_KEY_SUFFIX):
        return None

    segment = key[len(_KEY_PREFIX) : -len(_KEY_SUFFIX)]
    if not segment.strip():
        return None
    return segment


def find_local_branches_for_pr(git_ops: GitOps, repo_root: Path, pr_number: int) -> Iterator[str]:
    """Yield every local branch mapped to `pr_number`.

    The config is read when iteration starts; calling again re-reads the
    current state. Branches are yielded in config enumeration order and
    several branches may map to the same pull request.
    """
    wanted = str(pr_number)
    for key, value in git_ops.read_config_entries(repo_root):
        segment = extract_branch_segment(key)
        if segment is None or value != wanted:
            continue
        yield config_key_to_branch_name(segment)
