"""Runner configuration from environment variables."""

import os
from dataclasses import dataclass

DEFAULT_TIMEOUT_SECONDS = 300.0
DEFAULT_PLACEHOLDER_DELAY_MS = 500
_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {raw!r}")
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean (true/false), got {raw!r}")


@dataclass(frozen=True)
class RunnerConfig:
    """Runner configuration loaded from environment variables.

    max_concurrent_scripts of None means no admission control: any number of
    scripts may run at once.
    """

    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    shell: str = "bash"
    placeholder_delay_ms: int = DEFAULT_PLACEHOLDER_DELAY_MS
    kill_on_timeout: bool = True
    max_concurrent_scripts: int | None = None
    host: str = "127.0.0.1"
    port: int = 8765
    debug: bool = False

    @property
    def placeholder_delay_seconds(self) -> float:
        return self.placeholder_delay_ms / 1000

    @staticmethod
    def from_env() -> "RunnerConfig":
        """Load configuration from environment variables."""
        max_concurrent = _env_int("SDD_RUNNER_MAX_CONCURRENT", None)
        if max_concurrent == 0:
            raise ValueError("SDD_RUNNER_MAX_CONCURRENT must be at least 1 when set")
        port = _env_int("SDD_RUNNER_PORT", 8765)
        delay_ms = _env_int("SDD_RUNNER_PLACEHOLDER_DELAY_MS", DEFAULT_PLACEHOLDER_DELAY_MS)
        return RunnerConfig(
            timeout_seconds=_env_float("SDD_RUNNER_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
            shell=os.environ.get("SDD_RUNNER_SHELL", "bash"),
            placeholder_delay_ms=DEFAULT_PLACEHOLDER_DELAY_MS if delay_ms is None else delay_ms,
            kill_on_timeout=_env_bool("SDD_RUNNER_KILL_ON_TIMEOUT", True),
            max_concurrent_scripts=max_concurrent,
            host=os.environ.get("SDD_RUNNER_HOST", "127.0.0.1"),
            port=8765 if port is None else port,
            debug=_env_bool("SDD_RUNNER_DEBUG", False),
        )
