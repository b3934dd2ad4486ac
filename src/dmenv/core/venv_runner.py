"""Run binaries living inside a virtualenv."""

import logging
import sys
from pathlib import Path

from dmenv.cli.output import print_cmd
from dmenv.core.errors import BinaryNotFound, CommandFailed, VenvNotFound
from dmenv.core.process import ProcessRunner

logger = logging.getLogger(__name__)


def binaries_subdir() -> str:
    return "Scripts" if sys.platform == "win32" else "bin"


def binary_name(name: str) -> str:
    if sys.platform == "win32" and not name.endswith(".exe"):
        return f"{name}.exe"
    return name


class VenvRunner:
    """Resolve and run programs from the virtualenv's binaries directory.

    Commands always run with the project as working directory.
    """

    def __init__(self, project_path: Path, venv_path: Path, runner: ProcessRunner) -> None:
        self._project_path = project_path
        self._venv_path = venv_path
        self._runner = runner

    def binaries_path(self) -> Path:
        return self._venv_path / binaries_subdir()

    def resolve_path(self, name: str) -> Path:
        """Get the path of a binary in the virtualenv.

        Raises:
            VenvNotFound: If the virtualenv does not exist
            BinaryNotFound: If the binary does not exist
        """
        if not self._venv_path.exists():
            raise VenvNotFound(self._venv_path)
        path = self.binaries_path() / binary_name(name)
        if not path.exists():
            raise BinaryNotFound(path)
        return path

    def command(self, name: str, args: list[str]) -> list[str]:
        return [str(self.resolve_path(name)), *args]

    def run(self, name: str, args: list[str]) -> None:
        """Run a binary, raising CommandFailed on non-zero exit."""
        cmd = self.command(name, args)
        returncode = self.run_status(cmd)
        if returncode != 0:
            raise CommandFailed(cmd, returncode)

    def run_status(self, cmd: list[str]) -> int:
        print_cmd(cmd)
        returncode = self._runner.run(cmd, cwd=self._project_path)
        logger.debug("%s exited with %d", cmd[0], returncode)
        return returncode

    def get_output(self, name: str, args: list[str]) -> str:
        cmd = self.command(name, args)
        print_cmd(cmd)
        return self._runner.get_output(cmd, cwd=self._project_path)

    def exec(self, cmd: list[str]) -> None:
        print_cmd(cmd)
        self._runner.exec(cmd)
