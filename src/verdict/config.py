"""Package configuration: Settings, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from verdict._logging import configure_logging

__all__ = [
    "Settings",
    "get_config",
    "init",
]


@dataclass(frozen=True)
class Settings:
    """Configuration for verdict.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON logs (True) or colored console output (False).
    """

    log_level: str | None = None
    json_logs: bool = True


# Global settings (set by init())
_config: Settings | None = None


def _detect_log_level() -> str | None:
    """Read the log level from VERDICT_LOG_LEVEL, None when unset or empty."""
    level = os.environ.get("VERDICT_LOG_LEVEL", "").strip()
    return level.upper() or None


def _detect_json_logs() -> bool:
    """Read the log format from VERDICT_LOG_FORMAT ("json" or "console")."""
    fmt = os.environ.get("VERDICT_LOG_FORMAT", "").lower()
    if fmt == "console":
        return False
    if fmt and fmt != "json":
        logging.warning("Unknown VERDICT_LOG_FORMAT value '%s', defaulting to json", fmt)
    return True


def init(log_level: str | None = None, json_logs: bool | None = None) -> Settings:
    """Initialize verdict with the specified configuration.

    Unset arguments are resolved from the environment.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.
        json_logs: Emit JSON logs. Read from VERDICT_LOG_FORMAT if None.

    Returns:
        The Settings that were set.

    Example:
        ```python
        import verdict

        verdict.init(log_level="DEBUG", json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    _config = Settings(
        log_level=log_level if log_level is not None else _detect_log_level(),
        json_logs=json_logs if json_logs is not None else _detect_json_logs(),
    )

    if _config.log_level is not None:
        configure_logging(_config.log_level, json_output=_config.json_logs)

    return _config


def get_config() -> Settings:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = "verdict not initialized. Call verdict.init() first."
        raise RuntimeError(msg)
    return _config
