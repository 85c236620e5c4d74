"""Shell execution utilities.

Provides subprocess execution with proper error handling, including a
streaming variant that yields output lines while the process runs.
"""

import logging
import shutil
import subprocess
import tempfile
from collections.abc import Iterator
from dataclasses import dataclass
from typing import IO, cast

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Result of a shell command execution.

    Attributes:
        stdout: Standard output from the command.
        stderr: Standard error from the command.
        returncode: Exit code of the command.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if command executed successfully."""
        return self.returncode == 0


class CommandError(RuntimeError):
    """Raised when an external command exits with a non-zero status.

    Attributes:
        args_list: The command line that was executed.
        returncode: Exit code reported by the process.
        stderr: Captured standard error (may be empty).
    """

    def __init__(self, args: list[str], returncode: int, stderr: str = "") -> None:
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip()
        msg = f"Command '{' '.join(args)}' failed with exit code {returncode}"
        if detail:
            msg = f"{msg}: {detail}"
        super().__init__(msg)


def run_command(
    args: list[str],
    *,
    timeout: float | None = 60.0,
) -> CommandResult:
    """Execute a shell command and return the result.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait for command.

    Returns:
        CommandResult with stdout, stderr, and returncode.

    Raises:
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=False,
        timeout=timeout,
    )
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def run_checked(args: list[str], *, timeout: float | None = None) -> CommandResult:
    """Execute a command and raise if it fails.

    Args:
        args: Command and arguments to execute.
        timeout: Maximum time in seconds to wait, or None to wait forever.

    Returns:
        CommandResult of the successful execution.

    Raises:
        CommandError: If the command exits with a non-zero status.
        subprocess.TimeoutExpired: If command exceeds timeout.
        FileNotFoundError: If command executable is not found.
    """
    logger.debug("Running: %s", " ".join(args))
    result = run_command(args, timeout=timeout)
    if not result.success:
        raise CommandError(args, result.returncode, result.stderr or result.stdout)
    return result


def stream_command(args: list[str]) -> Iterator[str]:
    """Execute a command and yield its stdout line by line.

    Output is consumed as the process produces it, so memory use does not
    grow with the size of the output. Standard error is spooled to a
    temporary file so a chatty process cannot block on a full pipe.

    The generator is single-use; iterate it again by calling this
    function again.

    Args:
        args: Command and arguments to execute.

    Yields:
        Output lines without their trailing newline.

    Raises:
        CommandError: If the command exits with a non-zero status. Raised
            once the output has been fully consumed.
        FileNotFoundError: If command executable is not found.
    """
    logger.debug("Streaming: %s", " ".join(args))
    with tempfile.TemporaryFile(mode="w+") as err_file:
        with subprocess.Popen(
            args,
            stdout=subprocess.PIPE,
            stderr=err_file,
            text=True,
        ) as proc:
            for line in cast(IO[str], proc.stdout):
                yield line.rstrip("\r\n")
            returncode = proc.wait()

        if returncode != 0:
            err_file.seek(0)
            raise CommandError(args, returncode, err_file.read())


def command_exists(name: str) -> bool:
    """Check if a command exists in the system PATH.

    Absolute or relative paths are accepted too and resolve when the file
    exists and is executable.

    Args:
        name: Command name to check.

    Returns:
        True if command exists, False otherwise.
    """
    return shutil.which(name) is not None
