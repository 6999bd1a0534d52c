"""
Structured logging for cartool.

Configures structlog once per process and hands out bound loggers. Log
calls use snake_case event names with key/value fields::

    logger = get_logger(__name__)
    logger.warning("incompatible_property", property="HVAC_AC_ON", reason="access", value=0)

Output is JSON when stderr is not a TTY (log shipping) and a console
rendering otherwise. ``bind_context`` / ``LogContext`` attach
request-scoped fields, such as the MCP tool name, to every event logged
while they are active.

Tags:
    logging, structlog, observability, cartool

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from cartool.core.errors import ConfigError

_SERVICE_NAME = "cartool"


def _add_service_metadata(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add service-level metadata to all logs."""
    event_dict.setdefault("service.name", _SERVICE_NAME)
    return event_dict


def _ecs_field_names(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Rename timestamp/level to their ECS spellings for JSON output."""
    if "timestamp" in event_dict:
        event_dict["@timestamp"] = event_dict.pop("timestamp")
    if "level" in event_dict:
        event_dict["log.level"] = event_dict.pop("level")
    return event_dict


def _level_number(level: str) -> int:
    number = logging.getLevelName(level.upper())
    if not isinstance(number, int):
        raise ConfigError(f"Unknown log level: {level}")
    return number


def _processor_chain(json_format: bool, add_timestamp: bool) -> list[Processor]:
    chain: list[Processor] = [structlog.processors.TimeStamper(fmt="iso")] if add_timestamp else []
    chain += [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        _add_service_metadata,
    ]
    if json_format:
        return chain + [
            _ecs_field_names,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    return chain + [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(
    level: str = "INFO",
    json_format: bool | None = None,
    service: str = "cartool",
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the process.

    Events are rendered by structlog and written through stdlib logging to
    stderr; stdout belongs to command output and the MCP stdio transport.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        json_format: True for JSON, False for console, None for JSON unless
            stderr is a terminal
        service: Value of the ``service.name`` field
        add_timestamp: Include an ISO timestamp

    Raises:
        ConfigError: If ``level`` is not a logging level name

    Example:
        configure_logging(level="DEBUG", service="cartool-mcp")
    """
    global _SERVICE_NAME
    threshold = _level_number(level)
    _SERVICE_NAME = service

    if json_format is None:
        json_format = not sys.stderr.isatty()

    structlog.configure(
        processors=_processor_chain(json_format, add_timestamp),
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=threshold)


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger.

    Args:
        name: Logger name (usually __name__)
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context to include in all subsequent logs."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific keys from logging context."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound context."""
    structlog.contextvars.clear_contextvars()


class LogContext:
    """Context manager for scoped logging context.

    Example:
        with LogContext(tool="get_int_property", property_name="HVAC_FAN_SPEED"):
            logger.info("tool_called")
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs

    def __enter__(self) -> LogContext:
        bind_context(**self._context)
        return self

    def __exit__(self, *args) -> None:
        unbind_context(*self._context.keys())


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
    "LogContext",
]
