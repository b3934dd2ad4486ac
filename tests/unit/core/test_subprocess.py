"""Tests for subprocess wrapper with rich error context."""

import subprocess
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from dmenv.core.errors import CommandFailed, DmenvError
from dmenv.core.subprocess import run_subprocess_with_context


def test_success_case_returns_completed_process() -> None:
    """Test that successful subprocess execution returns CompletedProcess."""
    with patch("dmenv.core.subprocess.subprocess.run") as mock_run:
        mock_result = Mock(spec=subprocess.CompletedProcess)
        mock_result.returncode = 0
        mock_result.stdout = "attrs==23.1.0\n"
        mock_run.return_value = mock_result

        result = run_subprocess_with_context(
            ["pip", "freeze"],
            operation_context="freeze dependencies",
            cwd=Path("/project"),
        )

        assert result == mock_result
        mock_run.assert_called_once_with(
            ["pip", "freeze"],
            cwd=Path("/project"),
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=True,
        )


def test_failure_with_stderr_includes_stderr_in_error() -> None:
    """Test that subprocess failure with stderr includes stderr in error message."""
    with patch("dmenv.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(
            returncode=1,
            cmd=["pip", "freeze"],
            stderr="ERROR: something went wrong\n",
        )

        with pytest.raises(CommandFailed) as exc_info:
            run_subprocess_with_context(["pip", "freeze"], operation_context="freeze dependencies")

        error_message = str(exc_info.value)
        assert "Command failed: pip freeze" in error_message
        assert "Exit code: 1" in error_message
        assert "Failed to freeze dependencies" in error_message
        assert "stderr: ERROR: something went wrong" in error_message
        assert exc_info.value.returncode == 1


def test_failure_without_stderr_handles_gracefully() -> None:
    """Test that subprocess failure without stderr still produces useful error."""
    with patch("dmenv.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.CalledProcessError(returncode=127, cmd=["pip"])

        with pytest.raises(CommandFailed) as exc_info:
            run_subprocess_with_context(["pip"], operation_context="run pip")

        assert "stderr" not in str(exc_info.value)
        assert "Exit code: 127" in str(exc_info.value)


def test_missing_binary_raises_dmenv_error() -> None:
    """Test that FileNotFoundError is converted with command context."""
    with patch("dmenv.core.subprocess.subprocess.run") as mock_run:
        mock_run.side_effect = FileNotFoundError("No such file or directory")

        with pytest.raises(DmenvError) as exc_info:
            run_subprocess_with_context(["nope", "--version"], operation_context="get version")

        assert not isinstance(exc_info.value, CommandFailed)
        assert "Command not found while trying to get version: nope" in str(exc_info.value)
        assert "Full command: nope --version" in str(exc_info.value)
