"""Fake git operations for testing.

FakeGitOps is an in-memory implementation that accepts pre-configured state in
its constructor. Mutating operations are recorded for test assertions and the
repository config is updated in memory so lookups see earlier writes.
"""

from pathlib import Path

from prbranch.core.git_ops import GitOps, RemoteInfo, is_http_url


class FakeGitOps(GitOps):
    """In-memory fake implementation of git operations.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(
        self,
        *,
        repository_roots: dict[Path, Path] | None = None,
        current_branches: dict[Path, str] | None = None,
        remotes: dict[Path, dict[str, str]] | None = None,
        upstream_branches: set[tuple[Path, str]] | None = None,
        config_entries: dict[Path, list[tuple[str, str]]] | None = None,
        fetch_error: Exception | None = None,
        checkout_error: Exception | None = None,
        push_error: Exception | None = None,
        tracking_error: Exception | None = None,
        config_write_error: Exception | None = None,
        call_log: list[str] | None = None,
    ) -> None:
        """Create FakeGitOps with pre-configured state.

        Args:
            repository_roots: Mapping of path -> repository root for every path
                treated as inside a repository
            current_branches: Mapping of path -> checked-out branch
            remotes: Mapping of repo_root -> {remote name: url}
            upstream_branches: (repo_root, branch) pairs that already track a remote
            config_entries: Mapping of repo_root -> ordered config (key, value) pairs
            fetch_error: Raised by fetch() if set
            checkout_error: Raised by checkout_branch() if set
            push_error: Raised by push() if set
            tracking_error: Raised by set_tracking_branch() if set
            config_write_error: Raised by set_config_value() if set
            call_log: Shared list that mutating calls append their name to,
                for asserting ordering across fakes
        """
        self._repository_roots = repository_roots or {}
        self._current_branches = current_branches or {}
        self._remotes = remotes or {}
        self._upstream_branches = set(upstream_branches or set())
        self._config_entries = {
            root: list(entries) for root, entries in (config_entries or {}).items()
        }
        self._fetch_error = fetch_error
        self._checkout_error = checkout_error
        self._push_error = push_error
        self._tracking_error = tracking_error
        self._config_write_error = config_write_error
        self._call_log = call_log if call_log is not None else []

        # Mutation tracking
        self._fetches: list[tuple[Path, str, list[str]]] = []
        self._checked_out_branches: list[tuple[Path, str]] = []
        self._pushes: list[tuple[Path, str, str]] = []
        self._tracking_branches_set: list[tuple[Path, str, str]] = []
        self._config_writes: list[tuple[Path, str, str]] = []

    def get_repository_root(self, path: Path) -> Path | None:
        return self._repository_roots.get(path)

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._current_branches.get(cwd)

    def fetch(self, repo_root: Path, remote: str, refspecs: list[str]) -> None:
        self._call_log.append("fetch")
        if self._fetch_error is not None:
            raise self._fetch_error
        self._fetches.append((repo_root, remote, list(refspecs)))

    def checkout_branch(self, repo_root: Path, branch: str) -> None:
        self._call_log.append("checkout")
        if self._checkout_error is not None:
            raise self._checkout_error
        self._checked_out_branches.append((repo_root, branch))
        self._current_branches[repo_root] = branch

    def push(self, repo_root: Path, branch: str, remote: str) -> None:
        self._call_log.append("push")
        if self._push_error is not None:
            raise self._push_error
        self._pushes.append((repo_root, branch, remote))

    def get_http_remote(self, repo_root: Path, name: str) -> RemoteInfo | None:
        url = self._remotes.get(repo_root, {}).get(name)
        if url is None or not is_http_url(url):
            return None
        return RemoteInfo(name=name, url=url)

    def branch_has_upstream(self, repo_root: Path, branch: str) -> bool:
        return (repo_root, branch) in self._upstream_branches

    def set_tracking_branch(self, repo_root: Path, branch: str, remote: str) -> None:
        self._call_log.append("set_tracking_branch")
        if self._tracking_error is not None:
            raise self._tracking_error
        self._tracking_branches_set.append((repo_root, branch, remote))
        self._upstream_branches.add((repo_root, branch))

    def set_config_value(self, repo_root: Path, key: str, value: str) -> None:
        self._call_log.append("set_config_value")
        if self._config_write_error is not None:
            raise self._config_write_error
        self._config_writes.append((repo_root, key, value))

        entries = self._config_entries.setdefault(repo_root, [])
        for index, (existing_key, _) in enumerate(entries):
            if existing_key == key:
                entries[index] = (key, value)
                return
        entries.append((key, value))

    def read_config_entries(self, repo_root: Path) -> list[tuple[str, str]]:
        return list(self._config_entries.get(repo_root, []))

    @property
    def fetches(self) -> list[tuple[Path, str, list[str]]]:
        """Read-only access to (repo_root, remote, refspecs) fetch calls."""
        return self._fetches

    @property
    def checked_out_branches(self) -> list[tuple[Path, str]]:
        """Read-only access to (repo_root, branch) checkouts."""
        return self._checked_out_branches

    @property
    def pushes(self) -> list[tuple[Path, str, str]]:
        """Read-only access to (repo_root, branch, remote) pushes."""
        return self._pushes

    @property
    def tracking_branches_set(self) -> list[tuple[Path, str, str]]:
        """Read-only access to (repo_root, branch, remote) upstream changes."""
        return self._tracking_branches_set

    @property
    def config_writes(self) -> list[tuple[Path, str, str]]:
        """Read-only access to (repo_root, key, value) config writes."""
        return self._config_writes

    @property
    def call_log(self) -> list[str]:
        """Names of mutating calls in the order they were made."""
        return self._call_log
