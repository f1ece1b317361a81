"""Error taxonomy for pull request branch operations.

Every error derives from PrBranchError, which is itself a RuntimeError so that
callers treating integration failures as RuntimeError keep working.

Integration-layer errors (fetch, checkout, push, config writes, remote API)
are raised by the real git/gh implementations with the underlying
subprocess error chained as __cause__.
"""


class PrBranchError(RuntimeError):
    """Base class for all prbranch errors."""


class ValidationError(PrBranchError, ValueError):
    """A required argument was missing or invalid. Raised before any side effect."""


class RepositoryNotFoundError(ValidationError):
    """The given path is not inside a git repository."""


class FetchError(PrBranchError):
    """Fetching refs from a remote failed (missing ref, network, auth)."""


class CheckoutError(PrBranchError):
    """Checking out a branch failed (conflicting local changes, bad ref)."""


class PushError(PrBranchError):
    """Pushing a branch failed (auth, network, non-fast-forward)."""


class TrackingError(PrBranchError):
    """Configuring the upstream of a local branch failed."""


class ConfigWriteError(PrBranchError):
    """Writing a repository config value failed."""


class RemoteNotFoundError(PrBranchError):
    """No remote reachable over HTTP(S) exists under the requested name."""


class RemoteApiError(PrBranchError):
    """The remote pull request API rejected the request or could not be reached."""


class BranchNotFoundError(PrBranchError):
    """No local branch is mapped to the requested pull request number."""

    def __init__(self, pr_number: int) -> None:
        super().__init__(f"No local branch is associated with pull request #{pr_number}")
        self.pr_number = pr_number
