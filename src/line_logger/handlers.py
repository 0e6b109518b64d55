"""Processor and handler creation for the line logger.

This module builds two structlog pipelines. The line pipeline renders each
logged message into the plain ``[LEVEL] message`` form written to both
destinations. The diagnostics pipeline formats the logger's own fatal
messages for a standard library handler writing to stderr.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from .config import DEFAULT_TIMESTAMP_FORMAT, DEFAULT_TIMESTAMP_UTC, ConsoleHandlerConfig
from .log_levels import LogLevel


def render_line(_logger: WrappedLogger, _method_name: str, event_dict: EventDict) -> str:
    """Render an event as a ``[LEVEL] message`` line.

    The message is used verbatim. The trailing newline is added by the sink.

    Args:
        _logger:        Wrapped logger (unused)
        _method_name:   Name of the called method (unused, the level is read from the event)
        event_dict:     Event dictionary carrying "level" and "event"

    Returns:
        Rendered log line
    """
    level = LogLevel.from_name(event_dict["level"])
    return f"[{level}] {event_dict['event']}"


def create_line_processors() -> list[Processor]:
    """Create the processor chain used for log lines.

    Returns:
        List of structlog processors ending in the line renderer
    """
    return [
        structlog.stdlib.add_log_level,
        render_line,
    ]


def create_shared_processors() -> list[Processor]:
    """Create the list of processors used for diagnostics output.

    Returns:
        List of structlog processors enriching diagnostic events
    """
    return [
        # Standard library integration
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,

        # Error handling and stack traces
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,

        # Timestamp handling
        structlog.processors.TimeStamper(
            fmt=DEFAULT_TIMESTAMP_FORMAT,
            utc=DEFAULT_TIMESTAMP_UTC
        ),
    ]


def create_diagnostics_handler(
        config: ConsoleHandlerConfig,
        shared_processors: list[Processor]
) -> logging.Handler:
    """Create the console handler for diagnostics.

    Diagnostics go to stderr, so they never mix with log lines on stdout.

    Args:
        config:             Console handler configuration settings
        shared_processors:  List of shared structlog processors to use

    Returns:
        Configured handler instance
    """
    formatter = _create_console_formatter(config, shared_processors)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    return handler


def _create_console_formatter(
        config: ConsoleHandlerConfig,
        shared_processors: list[Processor]
) -> structlog.stdlib.ProcessorFormatter:
    """Create a formatter for diagnostics output.

    Args:
        config:             Console handler configuration
        shared_processors:  List of shared structlog processors

    Returns:
        Configured ProcessorFormatter for console output
    """
    exception_formatter = (
        structlog.dev.rich_traceback if config.rich_tracebacks else structlog.dev.plain_traceback
    )

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(
                colors=config.colors,
                exception_formatter=exception_formatter
            ),
        ],
    )
