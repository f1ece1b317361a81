import tomllib
from dataclasses import dataclass
from pathlib import Path

from prbranch.core.pull_request_service import DEFAULT_PUSH_DELAY_SECONDS, DEFAULT_REMOTE


@dataclass(frozen=True)
class LoadedConfig:
    """In-memory representation of `~/.prbranch/config.toml`."""

    remote: str = DEFAULT_REMOTE
    push_delay_seconds: float = DEFAULT_PUSH_DELAY_SECONDS


def default_config_dir() -> Path:
    return Path.home() / ".prbranch"


def load_config(config_dir: Path) -> LoadedConfig:
    """Load config.toml from the given directory if present; otherwise return defaults.

    Example config:
      remote = "origin"
      push_delay_seconds = 5.0

    Raises:
        ValueError: If a value has the wrong type or the delay is negative
    """
    cfg_path = config_dir / "config.toml"
    if not cfg_path.exists():
        return LoadedConfig()

    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))

    remote = data.get("remote", DEFAULT_REMOTE)
    if not isinstance(remote, str) or not remote:
        raise ValueError(f"'remote' in {cfg_path} must be a non-empty string")

    delay = data.get("push_delay_seconds", DEFAULT_PUSH_DELAY_SECONDS)
    if isinstance(delay, bool) or not isinstance(delay, int | float) or delay < 0:
        raise ValueError(f"'push_delay_seconds' in {cfg_path} must be a non-negative number")

    return LoadedConfig(remote=remote, push_delay_seconds=float(delay))
