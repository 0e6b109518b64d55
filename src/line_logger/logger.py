"""The line logger.

A Logger is a small immutable value holding a log file path and a termination
policy. Each call to log() renders one ``[LEVEL] message`` line, prints it to
stdout, appends it to the log file and, for error-level messages under a
terminating policy, ends the process.

I/O failures are not returned to the caller. A logger that cannot create or
write its file terminates the process with a diagnostic on stderr.
"""

import logging
from dataclasses import dataclass, field
from typing import Final

import structlog

from .config import DEFAULT_ENCODING, DEFAULT_LOG_FILE, resolve_log_file
from .diagnostics import fail_fast
from .handlers import create_line_processors
from .log_levels import LogLevel
from .sinks import ConsoleWriteError, LineWriter, create_log_file

# Built once and shared by every log() call
_LINE_PROCESSORS: Final = create_line_processors()
_LINE_WRAPPER_CLASS: Final = structlog.make_filtering_bound_logger(logging.NOTSET)


@dataclass(frozen=True, slots=True)
class Logger:
    """Logger writing each message to stdout and to a log file.

    Construction creates (or truncates) the log file right away, so an
    unusable destination is detected before the first message. Copies made
    with copy.copy() share the path but never a file handle, and do not
    touch the file.

    Attributes:
        log_file:               Path of the log file, "default.log" when empty
        terminate_on_error:     End the process after logging an ERROR message
        encoding:               Character encoding of the log file
    """

    log_file: str = DEFAULT_LOG_FILE
    terminate_on_error: bool = True
    encoding: str = field(default=DEFAULT_ENCODING, repr=False)

    def __post_init__(self) -> None:
        """Normalize the path and create the log file.

        A log file that cannot be created terminates the process.

        Raises:
            TypeError:  If the path or the policy flag has the wrong type
        """
        if not isinstance(self.terminate_on_error, bool):
            msg = f"terminate_on_error must be a bool, not {type(self.terminate_on_error).__name__}"
            raise TypeError(msg)

        object.__setattr__(self, "log_file", resolve_log_file(self.log_file))

        try:
            create_log_file(self.log_file, self.encoding)
        except OSError as e:
            fail_fast("Logger: I cannot create the log file", error=e, path=self.log_file)

    @classmethod
    def default(cls) -> "Logger":
        """Create a logger on "default.log" that terminates on errors."""
        return cls(DEFAULT_LOG_FILE, True)

    def log(self, level: LogLevel, message: str) -> None:
        """Log a message.

        The line is written to stdout first, then appended to the log file and
        flushed. The message is used verbatim. The process terminates if
        either write fails, or after both writes if level is ERROR and
        terminate_on_error is set.

        Args:
            level:      Severity of the message
            message:    Message text

        Raises:
            TypeError:  If level is not a LogLevel
        """
        if not isinstance(level, LogLevel):
            msg = f"level must be a LogLevel, not {type(level).__name__}"
            raise TypeError(msg)

        line_logger = structlog.wrap_logger(
            LineWriter(self.log_file, self.encoding),
            processors=_LINE_PROCESSORS,
            wrapper_class=_LINE_WRAPPER_CLASS,
        )
        emit = getattr(line_logger, level.method_name)

        try:
            emit(message)
        except ConsoleWriteError as e:
            fail_fast("Logger: I cannot write to the console.", error=e, path=self.log_file)
        except OSError as e:
            fail_fast("Logger: I cannot write to the log file.", error=e, path=self.log_file)

        if level is LogLevel.ERROR and self.terminate_on_error:
            fail_fast("Logger: Application terminated abnormally.", path=self.log_file)
