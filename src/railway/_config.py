"""Configuration: Settings and initialization."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from railway._logging import configure_logging, get_logger

if TYPE_CHECKING:
    from railway.async_.retry import RetryPolicy

__all__ = [
    "Settings",
    "init",
]

logger = get_logger(__name__)

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class Settings:
    """Explicit configuration for railway.

    Nothing here is read implicitly by the library: defaults that affect
    behavior (like retry) are handed over as values, e.g. via
    ``retry_policy()``.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Render logs as JSON (True) or colored console output.
        retry_attempts: Default number of attempts for ``retry``.
        retry_delay: Default delay in seconds between retry attempts.
    """

    log_level: str | None = None
    json_logs: bool = True
    retry_attempts: int = 3
    retry_delay: float = 0.0

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``RAILWAY_*`` environment variables.

        Reads ``RAILWAY_LOG_LEVEL``, ``RAILWAY_LOG_JSON``,
        ``RAILWAY_RETRY_ATTEMPTS`` and ``RAILWAY_RETRY_DELAY``. Unset variables
        keep their defaults; unparsable ones are logged and ignored.

        Example:
            ```python
            os.environ["RAILWAY_RETRY_ATTEMPTS"] = "5"
            Settings.from_env().retry_attempts  # 5
            ```
        """
        defaults = cls()
        log_level = os.environ.get("RAILWAY_LOG_LEVEL") or defaults.log_level
        return cls(
            log_level=log_level.upper() if log_level else None,
            json_logs=_env_bool("RAILWAY_LOG_JSON", defaults.json_logs),
            retry_attempts=_env_int("RAILWAY_RETRY_ATTEMPTS", defaults.retry_attempts, minimum=1),
            retry_delay=_env_float("RAILWAY_RETRY_DELAY", defaults.retry_delay),
        )

    def retry_policy(self) -> RetryPolicy:
        """Return a RetryPolicy built from these settings."""
        from railway.async_.retry import RetryPolicy

        return RetryPolicy(max_attempts=self.retry_attempts, delay=self.retry_delay)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    logger.warning("invalid_env_value", variable=name, value=raw, default=default)
    return default


def _env_int(name: str, default: int, *, minimum: int = 0) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("invalid_env_value", variable=name, value=raw, default=default)
        return default
    if value < minimum:
        logger.warning("invalid_env_value", variable=name, value=raw, default=default)
        return default
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("invalid_env_value", variable=name, value=raw, default=default)
        return default
    # NaN fails every comparison, so it falls through here too
    if not value >= 0:
        logger.warning("invalid_env_value", variable=name, value=raw, default=default)
        return default
    return value


def init(settings: Settings | None = None) -> Settings:
    """Resolve settings and configure logging.

    Args:
        settings: Explicit settings. Read from the environment if None.

    Returns:
        The resolved Settings.

    Example:
        ```python
        import railway

        settings = railway.init()
        await railway.retry(fetch, policy=settings.retry_policy())
        ```
    """
    resolved = settings if settings is not None else Settings.from_env()

    if resolved.log_level is not None:
        configure_logging(resolved.log_level, json_output=resolved.json_logs)
        logger.debug("railway_initialized", settings=resolved)

    return resolved
