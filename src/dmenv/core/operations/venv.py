"""Create, check and remove virtualenvs."""

import shutil
from pathlib import Path

from dmenv.cli.output import print_cmd, print_info_1, print_info_2
from dmenv.core.errors import VenvCreationFailed, VenvNotFound
from dmenv.core.process import ProcessRunner
from dmenv.core.python_info import PythonInfo
from dmenv.core.settings import Settings


def create(venv_path: Path, python_info: PythonInfo, settings: Settings, runner: ProcessRunner) -> None:
    """Create a new virtualenv with `python -m venv`.

    Parent directories are created as needed.

    Raises:
        VenvCreationFailed: If the venv module exits with a non-zero status
    """
    print_info_2(f"Creating virtualenv in: {venv_path}")
    venv_path.parent.mkdir(parents=True, exist_ok=True)
    cmd = [str(python_info.binary), "-m", "venv"]
    if settings.system_site_packages:
        cmd.append("--system-site-packages")
    cmd.append(str(venv_path))
    print_cmd(cmd)
    if runner.run(cmd) != 0:
        raise VenvCreationFailed(venv_path)


def clean(venv_path: Path) -> None:
    """Remove the virtualenv. No-op if it does not exist."""
    print_info_1(f"Cleaning {venv_path}")
    if not venv_path.exists():
        return
    shutil.rmtree(venv_path)


def expect(venv_path: Path) -> None:
    """Raise VenvNotFound unless the virtualenv exists."""
    if not venv_path.exists():
        raise VenvNotFound(venv_path)
