from pathlib import Path

from line_logger.config import EXIT_FAILURE


def test_invalid_path_terminates_process(run_script) -> None:
    result = run_script(
        """
        from line_logger import Logger

        Logger("/nonexistent/directory/test.log", True)
        print("unreachable")
        """
    )

    assert result.returncode == EXIT_FAILURE
    assert result.stdout == ""
    assert "Logger: I cannot create the log file" in result.stderr
    assert "FileNotFoundError" in result.stderr


def test_error_terminates_process_after_durable_write(tmp_path: Path, run_script) -> None:
    result = run_script(
        """
        from line_logger import Logger, LogLevel

        logger = Logger("death.log", True)
        logger.log(LogLevel.INFO, "Before the end")
        logger.log(LogLevel.ERROR, "The end")
        print("unreachable")
        """
    )

    assert result.returncode == EXIT_FAILURE
    assert result.stdout == "[INFO] Before the end\n[ERROR] The end\n"
    assert "Logger: Application terminated abnormally." in result.stderr
    assert (tmp_path / "death.log").read_bytes() == b"[INFO] Before the end\n[ERROR] The end\n"


def test_error_without_termination_keeps_process_alive(tmp_path: Path, run_script) -> None:
    result = run_script(
        """
        from line_logger import Logger, LogLevel

        logger = Logger("", False)
        logger.log(LogLevel.ERROR, "Recoverable")
        print("still running")
        """
    )

    assert result.returncode == 0
    assert result.stdout == "[ERROR] Recoverable\nstill running\n"
    assert result.stderr == ""
    assert (tmp_path / "default.log").read_bytes() == b"[ERROR] Recoverable\n"


def test_termination_cannot_be_caught(tmp_path: Path, run_script) -> None:
    result = run_script(
        """
        from line_logger import Logger, LogLevel

        logger = Logger("death.log", True)
        try:
            logger.log(LogLevel.ERROR, "The end")
        except BaseException:
            print("intercepted")
        finally:
            print("finally ran")
        print("still running")
        """
    )

    assert result.returncode == EXIT_FAILURE
    assert result.stdout == "[ERROR] The end\n"
    assert (tmp_path / "death.log").read_bytes() == b"[ERROR] The end\n"


def test_error_in_worker_thread_terminates_process(tmp_path: Path, run_script) -> None:
    result = run_script(
        """
        import threading

        from line_logger import Logger, LogLevel

        logger = Logger("death.log", True)
        worker = threading.Thread(target=logger.log, args=(LogLevel.ERROR, "The end"))
        worker.start()
        worker.join()
        print("still running")
        """
    )

    assert result.returncode == EXIT_FAILURE
    assert "still running" not in result.stdout
    assert "Logger: Application terminated abnormally." in result.stderr
    assert (tmp_path / "death.log").read_bytes() == b"[ERROR] The end\n"


def test_construction_failure_in_worker_thread_terminates_process(run_script) -> None:
    result = run_script(
        """
        import threading

        from line_logger import Logger

        worker = threading.Thread(target=Logger, args=("/nonexistent/dir/x.log", True))
        worker.start()
        worker.join()
        print("still running")
        """
    )

    assert result.returncode == EXIT_FAILURE
    assert "still running" not in result.stdout
    assert "Logger: I cannot create the log file" in result.stderr


def test_deleted_file_is_fatal_and_not_recreated(tmp_path: Path, run_script) -> None:
    result = run_script(
        """
        import os

        from line_logger import Logger, LogLevel

        logger = Logger("gone.log", False)
        os.remove("gone.log")
        logger.log(LogLevel.INFO, "Lost message")
        print("unreachable")
        """
    )

    assert result.returncode == EXIT_FAILURE
    assert result.stdout == "[INFO] Lost message\n"
    assert "Logger: I cannot write to the log file." in result.stderr
    assert "FileNotFoundError" in result.stderr
    assert not (tmp_path / "gone.log").exists()


def test_console_failure_has_own_diagnostic_and_still_writes_file(
        tmp_path: Path,
        run_script
) -> None:
    result = run_script(
        """
        import sys

        from line_logger import Logger, LogLevel


        class BrokenStdout:
            def write(self, _text):
                raise BrokenPipeError(32, "Broken pipe")

            def flush(self):
                raise BrokenPipeError(32, "Broken pipe")


        logger = Logger("console.log", False)
        sys.stdout = BrokenStdout()
        logger.log(LogLevel.WARNING, "Nobody is listening")
        sys.stderr.write("unreachable\\n")
        """
    )

    assert result.returncode == EXIT_FAILURE
    assert "Logger: I cannot write to the console." in result.stderr
    assert "I cannot write to the log file" not in result.stderr
    assert "unreachable" not in result.stderr
    assert (tmp_path / "console.log").read_bytes() == b"[WARNING] Nobody is listening\n"
