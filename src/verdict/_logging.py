"""Structured logging for verdict.

verdict is a library, so it never touches the root logger or structlog's
global configuration. Every logger returned by ``get_logger`` carries its own
processor chain and writes through the stdlib logger of the same name, under
the ``verdict`` namespace. Events are dropped by ``filter_by_level`` before any
rendering unless the host (or ``configure_logging``) enables the level.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    "LOGGER_NAME",
    "add_log_hook",
    "clear_log_hooks",
    "configure_logging",
    "get_logger",
    "remove_log_hook",
    "reset_logging",
]

LOGGER_NAME = "verdict"

# Handler installed by configure_logging(), replaced on reconfiguration.
_handler: logging.Handler | None = None

_log_hooks: list[Callable[[dict[str, Any]], None]] = []


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in _log_hooks:
        try:
            hook(event_dict.copy())
        except Exception:
            pass  # a failing hook never breaks logging
    return event_dict


def _processors() -> list[Any]:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _run_hooks,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger for a verdict module.

    Args:
        name: Logger name, usually ``__name__``. Defaults to ``"verdict"``.

    Returns:
        A structlog BoundLogger wrapping ``logging.getLogger(name)``.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or LOGGER_NAME),
        processors=_processors(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def configure_logging(level: str = "INFO", *, json_output: bool = True) -> None:
    """Send verdict's events to stderr at ``level``.

    Only the ``verdict`` logger is touched: its level is set, a rendering
    handler replaces any earlier one installed here, and propagation is
    turned off so records are not emitted twice by the host's handlers.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
    """
    global _handler  # noqa: PLW0603

    renderer: Any
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[structlog.stdlib.add_log_level, structlog.stdlib.add_logger_name],
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False
    _handler = handler


def reset_logging() -> None:
    """Undo configure_logging(), handing verdict's records back to the host."""
    global _handler  # noqa: PLW0603

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
        _handler = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


# --- Logging Hooks ---


def add_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Register a hook called with a copy of each enabled verdict event."""
    _log_hooks.append(hook)


def remove_log_hook(hook: Callable[[dict[str, Any]], None]) -> None:
    """Remove a previously registered log hook."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()
