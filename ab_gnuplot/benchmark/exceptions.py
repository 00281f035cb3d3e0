"""Custom exceptions for the benchmarking system."""
from typing import Iterable, List, Optional

from ab_gnuplot.const import (
    EXIT_USER_ABORT, EXIT_INVALID_OPTION, EXIT_UNRECOGNIZED_OPTIONS,
    EXIT_MISSING_COMMAND, EXIT_GENERIC_FAILURE,
)


class AbGnuplotError(Exception):
    """Base class for every error reported to the user."""
    exit_code = EXIT_GENERIC_FAILURE


class UserAbortError(AbGnuplotError):
    """Raised when the user aborts an interactive prompt."""
    exit_code = EXIT_USER_ABORT

    def __init__(self, message: str = "Aborted by user"):
        super().__init__(message)


class InvalidOptionValueError(AbGnuplotError):
    """Exception raised when an option has an invalid value."""
    exit_code = EXIT_INVALID_OPTION

    def __init__(self, name: str, value: str, reason: str = ""):
        self.name = name
        self.value = value
        message = f"Invalid value of the --{name} option: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


def _as_typed(name: str) -> str:
    return name if name.startswith("-") else f"--{name}"


class UnrecognizedOptionsError(AbGnuplotError):
    """Exception raised when some options were not consumed by any stage."""
    exit_code = EXIT_UNRECOGNIZED_OPTIONS

    def __init__(self, names: Iterable[str]):
        self.names: List[str] = list(names)
        if len(self.names) == 1:
            message = f"Unrecognized option: {_as_typed(self.names[0])}"
        else:
            message = "Unrecognized options: " + ", ".join(_as_typed(name) for name in self.names)
        super().__init__(message)


class MissingCommandError(AbGnuplotError):
    """Exception raised when a required external command can't be found."""
    exit_code = EXIT_MISSING_COMMAND

    def __init__(self, command: str, instructions: str = ""):
        self.command = command
        self.instructions = instructions
        message = f"The command {command!r} is not available."
        if instructions:
            message += f"\n{instructions}"
        super().__init__(message)


class GenericFailureError(AbGnuplotError):
    """Exception raised for any other failure."""
    exit_code = EXIT_GENERIC_FAILURE


class ProcessFailedError(GenericFailureError):
    """Exception raised when an external process exits with a non-zero code."""

    def __init__(self, command: List[str], returncode: int, output: Optional[str] = None):
        self.command = list(command)
        self.returncode = returncode
        self.output = (output or "").strip()
        message = f"{' '.join(self.command)} failed with exit code {returncode}"
        if self.output:
            message += f":\n{self.output}"
        super().__init__(message)


class ResponseCheckError(GenericFailureError):
    """Exception raised when the benchmarked URL doesn't respond with HTTP 200."""
    pass
