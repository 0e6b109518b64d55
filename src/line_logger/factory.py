"""Explicitly initialized shared logger.

Applications that want one logger for the whole process configure it once
with configure_logger() and retrieve it with get_logger(). There is no
implicit default: get_logger() fails until the logger has been configured.

Code that should not depend on process-wide state can create its own
ConfigurationState, or simply construct and pass a Logger.
"""

import os
import threading
from typing import Final

from .config import DEFAULT_LOG_FILE
from .logger import Logger


class ConfigurationState:
    """Holds a shared Logger that can be configured only once.

    Attributes:
        _logger:    Configured logger, None until configure() is called
        _lock:      Threading lock for thread-safe state modifications
    """

    def __init__(self) -> None:
        """Initialize an unconfigured state."""
        self._logger: Logger | None = None
        self._lock: Final = threading.Lock()

    def is_configured(self) -> bool:
        """Check if the shared logger has been configured.

        Returns:
            True if a logger has been configured, False otherwise
        """
        return self._logger is not None

    def get_logger(self) -> Logger:
        """Get the configured logger.

        Returns:
            The shared Logger

        Raises:
            RuntimeError: If no logger has been configured yet
        """
        logger = self._logger
        if logger is None:
            msg = "The logger hasn't been configured. Call configure_logger() first."
            raise RuntimeError(msg)
        return logger

    def configure(
            self,
            log_file_path: str | os.PathLike[str] | None = DEFAULT_LOG_FILE,
            terminate_on_error: bool = True
    ) -> Logger:
        """Create and store the shared logger.

        The log file is created while the lock is held, so concurrent callers
        cannot both truncate it.

        Args:
            log_file_path:      Path of the log file
            terminate_on_error: End the process after logging an ERROR message

        Returns:
            The newly configured Logger

        Raises:
            RuntimeError: If a logger has already been configured
        """
        with self._lock:
            if self.is_configured():
                msg = (
                    "The logger has already been configured. "
                    "configure_logger() should only be called once."
                )
                raise RuntimeError(msg)
            self._logger = Logger(log_file_path, terminate_on_error)
            return self._logger


# Global configuration state
_config_state: Final = ConfigurationState()


def configure_logger(
        log_file_path: str | os.PathLike[str] | None = DEFAULT_LOG_FILE,
        terminate_on_error: bool = True
) -> Logger:
    """Configure the process-wide logger.

    Args:
        log_file_path:      Path of the log file, "default.log" when empty
        terminate_on_error: End the process after logging an ERROR message

    Returns:
        The configured Logger

    Raises:
        RuntimeError: If the process-wide logger has already been configured
    """
    return _config_state.configure(log_file_path, terminate_on_error)


def get_logger() -> Logger:
    """Get the process-wide logger.

    Returns:
        The Logger created by configure_logger()

    Raises:
        RuntimeError: If configure_logger() has not been called
    """
    return _config_state.get_logger()
