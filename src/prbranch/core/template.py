"""Pull request description template lookup."""

import logging
from pathlib import Path

from prbranch.core.filesystem_ops import FileSystemOps

logger = logging.getLogger(__name__)

# Checked in order; the first readable file wins
TEMPLATE_PATHS = (
    Path("PULL_REQUEST_TEMPLATE.md"),
    Path("PULL_REQUEST_TEMPLATE"),
    Path(".github") / "PULL_REQUEST_TEMPLATE.md",
    Path(".github") / "PULL_REQUEST_TEMPLATE",
)


def get_pull_request_template(fs: FileSystemOps, repo_root: Path) -> str | None:
    """Read the repository's pull request template, if any.

    A candidate that exists but cannot be read (permissions, invalid UTF-8)
    is skipped in favour of the next one. File system errors never propagate.

    Returns:
        Template text, or None if no candidate could be read
    """
    for relative in TEMPLATE_PATHS:
        path = repo_root / relative
        if not fs.exists(path):
            continue
        try:
            return fs.read_text(path, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Skipping unreadable template %s: %s", path, e)
    return None
