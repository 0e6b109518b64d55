"""Plain line logging to the console and a log file.

This package provides a small logger that writes every message as a single
``[LEVEL] message`` line to standard output and appends the same line to a log
file. Rendering goes through a structlog processor chain; the logger's own
diagnostics go through structlog and the standard library logging to stderr.

Key Features:
    - Four severities: INFO, DEBUG, WARNING and ERROR
    - Identical line format on stdout and in the log file
    - Log file created (or truncated) at construction, so a bad path fails early
    - Every message opened, appended, flushed and closed on the calling thread
    - Optional process termination after an ERROR message
    - Immutable logger values that can be copied and shared between threads
    - Optional process-wide logger configured explicitly once

Basic Usage:
    ```python
    from line_logger import Logger, LogLevel

    logger = Logger("logs/app.log", terminate_on_error=False)
    logger.log(LogLevel.INFO, "Application started")
    logger.log(LogLevel.WARNING, "Disk usage at 85%")

    # Terminates the process after writing the line
    Logger("logs/app.log").log(LogLevel.ERROR, "Unrecoverable state")
    ```

Shared Logger:
    ```python
    from line_logger import LogLevel, configure_logger, get_logger

    configure_logger("logs/app.log", terminate_on_error=False)

    # Anywhere else in the application
    get_logger().log(LogLevel.DEBUG, "Cache warmed")
    ```

Implementation Notes:
    - An empty log file path resolves to "default.log" in the working directory
    - Messages are written verbatim, embedded newlines included
    - The log file must still exist when a message is logged; it is never recreated
    - Failing to create or write the log file terminates the process (exit status 1)
    - Diagnostics are written to stderr and never mix with log lines on stdout
    - Lines from concurrent callers may interleave; serialize calls if ordering matters
"""

from .config import DEFAULT_LOG_FILE
from .factory import configure_logger, get_logger
from .log_levels import LogLevel
from .logger import Logger

__all__ = ["DEFAULT_LOG_FILE", "LogLevel", "Logger", "configure_logger", "get_logger"]
