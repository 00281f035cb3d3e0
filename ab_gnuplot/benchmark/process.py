"""Execution of the external commands."""
import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .exceptions import ProcessFailedError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    code: int
    output: str


def run_command(cmd: List[str], cwd: Optional[Path] = None) -> CommandResult:
    """Run a command, capturing stdout and stderr together."""
    logger.debug(f"Running {' '.join(cmd)}")
    proc = subprocess.run(
        cmd,
        cwd=str(cwd) if cwd else None,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        errors="replace",
        check=False,
    )
    return CommandResult(code=proc.returncode, output=proc.stdout or "")


def run_checked(cmd: List[str], cwd: Optional[Path] = None) -> str:
    """
    Run a command and return its output.

    Raises:
        ProcessFailedError: If the command exits with a non-zero code.
    """
    result = run_command(cmd, cwd)
    if result.code != 0:
        raise ProcessFailedError(cmd, result.code, result.output)
    return result.output


def run_streaming(cmd: List[str], cwd: Optional[Path] = None) -> int:
    """Run a command letting it write directly to our stdout/stderr."""
    logger.debug(f"Running {' '.join(cmd)}")
    proc = subprocess.run(cmd, cwd=str(cwd) if cwd else None, check=False)
    return proc.returncode
