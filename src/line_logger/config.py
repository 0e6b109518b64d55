"""Configuration constants and settings for the line logger.

The logger itself takes its settings as constructor arguments; this module holds
the defaults those arguments fall back to, the path normalization rule, and the
console settings of the internal diagnostics output.
"""

import os
from dataclasses import dataclass
from typing import Final

DEFAULT_LOG_FILE: Final = "default.log"
DEFAULT_ENCODING: Final = "utf-8"

# Exit status used for every fail-fast termination
EXIT_FAILURE: Final = 1

DIAGNOSTICS_LOGGER_NAME: Final = "line_logger"
DEFAULT_TIMESTAMP_FORMAT: Final = "%Y-%m-%d %H:%M:%S"
DEFAULT_TIMESTAMP_UTC: Final = False


def resolve_log_file(log_file_path: str | os.PathLike[str] | None) -> str:
    """Normalize a user supplied log file path.

    Empty strings and None resolve to DEFAULT_LOG_FILE. Path-like objects are
    converted to their string form. Relative paths are kept relative, so they
    are resolved against the working directory at each file operation.

    Args:
        log_file_path: Path given by the caller

    Returns:
        Non-empty path string

    Raises:
        TypeError: If the value is neither a string nor path-like
    """
    if log_file_path is None:
        return DEFAULT_LOG_FILE

    path = os.fspath(log_file_path)
    if not isinstance(path, str):
        msg = f"log_file_path must be a str or path-like, not {type(log_file_path).__name__}"
        raise TypeError(msg)

    return path or DEFAULT_LOG_FILE


@dataclass(frozen=True, slots=True)
class ConsoleHandlerConfig:
    """Configuration for the diagnostics console output.

    Attributes:
        colors:             Enable colored output (requires 'colorama' on Windows)
        rich_tracebacks:    Enable rich traceback formatting (requires 'rich' library)
    """

    colors: bool = False
    rich_tracebacks: bool = False

    @classmethod
    def create_default(cls) -> "ConsoleHandlerConfig":
        """Create the default diagnostics console configuration.

        Plain output without colors, so diagnostics stay readable when stderr
        is redirected to a file or captured by a supervisor.

        Returns:
            ConsoleHandlerConfig with colors and rich tracebacks disabled
        """
        return cls(colors=False, rich_tracebacks=False)
