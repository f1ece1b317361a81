"""Tests for RealGitHubOps with an injected command executor."""

from pathlib import Path

import pytest

from prbranch.core.errors import RemoteApiError
from prbranch.core.github_ops import (
    RealGitHubOps,
    RepositoryRef,
    parse_github_remote_url,
    parse_pr_number_from_url,
)

REPO = Path("/repo")
MINE = RepositoryRef(owner="me", name="project")
UPSTREAM = RepositoryRef(owner="upstream", name="project")


class RecordingExecutor:
    """Returns canned stdout and records every command."""

    def __init__(self, stdout: str = "", error: Exception | None = None) -> None:
        self.stdout = stdout
        self.error = error
        self.commands: list[tuple[list[str], Path]] = []

    def __call__(self, cmd: list[str], cwd: Path) -> str:
        self.commands.append((cmd, cwd))
        if self.error is not None:
            raise self.error
        return self.stdout


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://github.com/octo/hello.git", RepositoryRef("octo", "hello")),
        ("https://github.com/octo/hello", RepositoryRef("octo", "hello")),
        ("https://github.com/octo/hello/", RepositoryRef("octo", "hello")),
        ("https://token@github.com/octo/hello.git", RepositoryRef("octo", "hello")),
        ("git@github.com:octo/hello.git", RepositoryRef("octo", "hello")),
        ("HTTPS://GitHub.com/octo/hello.git", RepositoryRef("octo", "hello")),
        ("https://gitlab.com/octo/hello.git", None),
        ("https://github.com/octo", None),
        ("not a url", None),
    ],
)
def test_parse_github_remote_url(url: str, expected: RepositoryRef | None) -> None:
    assert parse_github_remote_url(url) == expected


def test_parse_pr_number_from_url() -> None:
    assert parse_pr_number_from_url("https://github.com/o/r/pull/23") == 23
    assert parse_pr_number_from_url("https://github.com/o/r/pull/23\n") == 23
    assert parse_pr_number_from_url("https://github.com/o/r/issues/23") is None


def test_repository_full_name() -> None:
    assert UPSTREAM.full_name == "upstream/project"


def test_create_pr_same_repository() -> None:
    executor = RecordingExecutor(stdout="https://github.com/me/project/pull/5\n")

    pr = RealGitHubOps(execute_fn=executor).create_pr(
        REPO, MINE, MINE, "feature", "main", "Title", "Body"
    )

    assert executor.commands == [
        (
            [
                "gh",
                "pr",
                "create",
                "--repo",
                "me/project",
                "--head",
                "feature",
                "--base",
                "main",
                "--title",
                "Title",
                "--body",
                "Body",
            ],
            REPO,
        )
    ]
    assert pr.number == 5
    assert pr.url == "https://github.com/me/project/pull/5"
    assert pr.title == "Title"
    assert pr.state == "OPEN"


def test_create_pr_from_fork_qualifies_head() -> None:
    executor = RecordingExecutor(stdout="https://github.com/upstream/project/pull/88")

    pr = RealGitHubOps(execute_fn=executor).create_pr(
        REPO, MINE, UPSTREAM, "feature", "develop", "T", ""
    )

    cmd = executor.commands[0][0]
    assert cmd[cmd.index("--repo") + 1] == "upstream/project"
    assert cmd[cmd.index("--head") + 1] == "me:feature"
    assert cmd[cmd.index("--base") + 1] == "develop"
    assert pr.number == 88


def test_create_pr_uses_last_output_line() -> None:
    executor = RecordingExecutor(
        stdout=(
            "\nCreating pull request for feature into main\n\n"
            "https://github.com/me/project/pull/9\n"
        )
    )

    pr = RealGitHubOps(execute_fn=executor).create_pr(REPO, MINE, MINE, "feature", "main", "T", "")

    assert pr.number == 9


def test_create_pr_unparseable_output() -> None:
    executor = RecordingExecutor(stdout="something unexpected")

    with pytest.raises(RemoteApiError, match="Could not parse"):
        RealGitHubOps(execute_fn=executor).create_pr(REPO, MINE, MINE, "f", "main", "T", "")


def test_create_pr_propagates_command_failure() -> None:
    executor = RecordingExecutor(error=RemoteApiError("a pull request already exists"))

    with pytest.raises(RemoteApiError, match="already exists"):
        RealGitHubOps(execute_fn=executor).create_pr(REPO, MINE, MINE, "f", "main", "T", "")


def test_get_pr_title() -> None:
    executor = RecordingExecutor(stdout='{"title": "Fix Bug #123!!"}')

    assert RealGitHubOps(execute_fn=executor).get_pr_title(REPO, 123) == "Fix Bug #123!!"
    assert executor.commands == [(["gh", "pr", "view", "123", "--json", "title"], REPO)]


def test_get_pr_title_returns_none_on_failure() -> None:
    executor = RecordingExecutor(error=RemoteApiError("no pull requests found"))

    assert RealGitHubOps(execute_fn=executor).get_pr_title(REPO, 1) is None


def test_get_pr_title_returns_none_on_bad_json() -> None:
    executor = RecordingExecutor(stdout="not json")

    assert RealGitHubOps(execute_fn=executor).get_pr_title(REPO, 1) is None
