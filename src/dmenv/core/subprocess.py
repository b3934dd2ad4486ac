"""Subprocess execution with rich error context."""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from dmenv.core.errors import CommandFailed, DmenvError

logger = logging.getLogger(__name__)


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    capture_output: bool = True,
    check: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess and turn failures into DmenvError.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of the operation,
            used in error messages ("freeze dependencies")
        cwd: Working directory for command execution
        capture_output: Whether to capture stdout/stderr (default: True)
        check: Whether to raise on non-zero exit (default: True)
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        CommandFailed: If the command exits with a non-zero status
        DmenvError: If the command binary is not found
    """
    logger.debug("Running %s (cwd=%s)", cmd, cwd)
    try:
        return subprocess.run(
            list(cmd),
            cwd=cwd,
            capture_output=capture_output,
            text=True,
            encoding="utf-8",
            check=check,
            **kwargs,
        )
    except subprocess.CalledProcessError as e:
        details = f"Failed to {operation_context}"
        if e.stderr:
            stderr_stripped = e.stderr.strip()
            if stderr_stripped:
                details += f"\nstderr: {stderr_stripped}"
        raise CommandFailed([str(arg) for arg in cmd], e.returncode, details) from e
    except FileNotFoundError as e:
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        raise DmenvError(error_msg) from e
