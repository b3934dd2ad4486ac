"""Process execution interface.

Architecture:
- ProcessRunner: Abstract base class defining the interface
- RealProcessRunner: Production implementation using subprocess and os.execv

Fakes live in tests/fakes/process_runner.py.
"""

import logging
import os
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import NoReturn

from dmenv.core.errors import DmenvError
from dmenv.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


class ProcessRunner(ABC):
    """Abstract interface for running external programs.

    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def run(self, cmd: list[str], cwd: Path | None = None) -> int:
        """Run a command with inherited stdio and return its exit code."""
        ...

    @abstractmethod
    def get_output(self, cmd: list[str], cwd: Path | None = None) -> str:
        """Run a command and return its stdout.

        Raises:
            CommandFailed: If the command exits with a non-zero status
        """
        ...

    @abstractmethod
    def exec(self, cmd: list[str]) -> None:
        """Replace the current process with cmd.

        Real implementations never return.
        """
        ...


class RealProcessRunner(ProcessRunner):
    """Production implementation using subprocess."""

    def run(self, cmd: list[str], cwd: Path | None = None) -> int:
        logger.debug("Running %s (cwd=%s)", cmd, cwd)
        try:
            result = subprocess.run(cmd, cwd=cwd, check=False)
        except FileNotFoundError as e:
            raise DmenvError(f"Command not found: {cmd[0]}") from e
        return result.returncode

    def get_output(self, cmd: list[str], cwd: Path | None = None) -> str:
        result = run_subprocess_with_context(
            cmd, operation_context=f"run {Path(cmd[0]).name}", cwd=cwd
        )
        return result.stdout

    def exec(self, cmd: list[str]) -> NoReturn:
        logger.debug("Replacing process with %s", cmd)
        os.execv(cmd[0], cmd)
