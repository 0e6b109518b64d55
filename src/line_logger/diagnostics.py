"""Diagnostics output and fail-fast termination.

The line logger reports its own fatal conditions through a structlog logger
bound to a dedicated standard library logger. The handler is attached on first
use and the logger does not propagate, so the host application's logging
configuration is neither required nor modified.
"""

import contextlib
import logging
import os
import sys
import threading
from typing import Any, Final, NoReturn

import structlog
from structlog.stdlib import BoundLogger

from .config import DIAGNOSTICS_LOGGER_NAME, EXIT_FAILURE, ConsoleHandlerConfig
from .handlers import create_diagnostics_handler, create_shared_processors

_setup_lock: Final = threading.Lock()
_diagnostics_logger: BoundLogger | None = None


def get_diagnostics_logger(config: ConsoleHandlerConfig | None = None) -> BoundLogger:
    """Get the structlog logger used for the line logger's own diagnostics.

    The underlying standard library logger is configured once; later calls
    return the same bound logger and ignore the config argument.

    Args:
        config: Optional console configuration for the first call

    Returns:
        BoundLogger writing to stderr
    """
    global _diagnostics_logger

    with _setup_lock:
        if _diagnostics_logger is None:
            _diagnostics_logger = _create_diagnostics_logger(
                config or ConsoleHandlerConfig.create_default()
            )
        return _diagnostics_logger


def _create_diagnostics_logger(config: ConsoleHandlerConfig) -> BoundLogger:
    """Attach the stderr handler and wrap the standard library logger.

    Args:
        config: Console configuration for the diagnostics handler

    Returns:
        BoundLogger bound to the diagnostics logger
    """
    shared_processors = create_shared_processors()
    handler = create_diagnostics_handler(config, shared_processors)

    std_logger = logging.getLogger(DIAGNOSTICS_LOGGER_NAME)
    std_logger.handlers.clear()  # We only want our handler
    std_logger.addHandler(handler)
    std_logger.propagate = False
    std_logger.setLevel(logging.DEBUG)

    return structlog.wrap_logger(
        std_logger,
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=BoundLogger,
    )


def fail_fast(event: str, error: BaseException | None = None, **context: Any) -> NoReturn:
    """Report a fatal condition and terminate the process.

    The diagnostic is written to stderr, the standard streams are flushed and
    the process exits with status EXIT_FAILURE through os._exit(). The exit
    cannot be caught by the caller and ends the whole process even when
    called from a worker thread. atexit handlers and finally blocks do not run.

    Args:
        event:      Diagnostic message
        error:      Optional exception that caused the failure, included in the diagnostic
        **context:  Additional key/value pairs for the diagnostic
    """
    if error is not None:
        context["error"] = repr(error)

    get_diagnostics_logger().critical(event, **context)
    _flush_standard_streams()
    os._exit(EXIT_FAILURE)


def _flush_standard_streams() -> None:
    # A broken console must not keep the process alive
    for stream in (sys.stdout, sys.stderr):
        if stream is None:
            continue
        with contextlib.suppress(OSError, ValueError):
            stream.flush()
