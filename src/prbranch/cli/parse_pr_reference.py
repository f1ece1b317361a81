"""Parse PR reference from user input."""

import re

from prbranch.cli.output import error_output


def parse_pr_reference(reference: str) -> int:
    """Parse PR number from plain number or GitHub URL.

    Accepts:
      - Plain number: "123"
      - GitHub URL: "https://github.com/owner/repo/pull/123"

    Raises:
        SystemExit: If input format is invalid or the number is not positive

    Examples:
        >>> parse_pr_reference("123")
        123
        >>> parse_pr_reference("https://github.com/owner/repo/pull/456")
        456
        >>> parse_pr_reference("https://github.com/owner/repo/pull/789#issuecomment-123")
        789
    """
    # Pattern matches:
    # - Optional "pull/" prefix
    # - Digits
    # - Optional trailing slash, query string or fragment
    pattern = r"^(?:https?://[^/]+/[^/]+/[^/]+/pull/)?(\d+)/?(?:[?#].*)?$"
    match = re.match(pattern, reference.strip())

    if match is None:
        error_output(
            f"Invalid PR number or URL: {reference}\n\n"
            + "Expected formats:\n"
            + "  • Plain number: 123\n"
            + "  • GitHub URL: https://github.com/owner/repo/pull/456"
        )
        raise SystemExit(1)

    number = int(match.group(1))
    if number <= 0:
        error_output(f"PR number must be a positive integer: {reference}")
        raise SystemExit(1)

    return number
