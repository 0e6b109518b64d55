"""File and console sinks for rendered log lines.

No file handle outlives a single call: the log file is opened, written,
flushed and closed for every line, so the file on disk always reflects
external deletion or truncation.
"""

import os
import sys
from typing import TextIO


def create_log_file(path: str, encoding: str) -> None:
    """Create the log file, truncating it if it already exists.

    Args:
        path:       Log file path
        encoding:   Character encoding of the log file

    Raises:
        OSError: If the file cannot be created
    """
    with open(path, "w", encoding=encoding):
        pass


def open_for_append(path: str, encoding: str) -> TextIO:
    """Open an existing log file for appending.

    Unlike open(path, "a") this never creates the file. A log file removed
    after the logger was constructed makes this call fail.

    Args:
        path:       Log file path
        encoding:   Character encoding of the log file

    Returns:
        Text stream positioned at the end of the file

    Raises:
        OSError: If the file does not exist or cannot be opened for writing
    """
    fd = os.open(path, os.O_WRONLY | os.O_APPEND)
    # newline="" keeps "\n" untranslated on every platform
    return open(fd, "a", encoding=encoding, newline="")


def append_line(path: str, line: str, encoding: str) -> None:
    """Append one line plus a newline to the log file and flush it.

    Raises:
        OSError: If the file cannot be opened, written or flushed
    """
    with open_for_append(path, encoding) as stream:
        stream.write(line + "\n")
        stream.flush()


class ConsoleWriteError(OSError):
    """Raised when a rendered line could not be written to stdout."""


class LineWriter:
    """structlog logger object writing each rendered line to stdout and then to a file.

    Every level method receives the already rendered line, the same way
    structlog.PrintLogger does, so the object can be wrapped with
    structlog.wrap_logger.

    Attributes:
        path:       Log file path
        encoding:   Character encoding of the log file
    """

    def __init__(self, path: str, encoding: str) -> None:
        self.path = path
        self.encoding = encoding

    def __repr__(self) -> str:
        return f"<LineWriter(path={self.path!r})>"

    def msg(self, message: str) -> None:
        """Write a rendered line to stdout, then append it to the log file.

        The console write happens first. A console failure does not prevent
        the file append; it is raised once the line is in the file.

        Args:
            message: Rendered log line without trailing newline

        Raises:
            ConsoleWriteError:  If the stdout write fails
            OSError:            If the file write fails
        """
        console_error = None
        try:
            _write_console(sys.stdout, message)
        except OSError as e:
            console_error = e

        append_line(self.path, message, self.encoding)

        if console_error is not None:
            raise ConsoleWriteError(*console_error.args) from console_error

    log = debug = info = warn = warning = msg
    fatal = failure = err = error = critical = exception = msg


def _write_console(stream: TextIO | None, line: str) -> None:
    # No console at all, e.g. under pythonw
    if stream is None:
        return
    stream.write(line + "\n")
    stream.flush()
