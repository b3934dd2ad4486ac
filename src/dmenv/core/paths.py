"""Location of the files dmenv manages for a project.

The virtualenv path depends on the python version, so that switching
interpreters never reuses an incompatible virtualenv:

    <project>/.venv/dev/3.11.4
    <project>/.venv/prod/3.11.4

When venv_outside_project is set, virtualenvs go to the user data directory
instead, with the project name as the last component.
"""

import logging
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dmenv import DEV_LOCK_FILENAME, PROD_LOCK_FILENAME
from dmenv.core.settings import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Paths:
    project: Path
    venv: Path
    lock: Path
    setup_py: Path


def find_project_path(cwd: Path) -> Path:
    """Return the nearest directory containing setup.py, or cwd if none does."""
    for candidate in (cwd, *cwd.parents):
        if (candidate / "setup.py").exists():
            return candidate
    return cwd


def user_data_dir(environ: Mapping[str, str]) -> Path:
    if sys.platform == "win32":
        local_app_data = environ.get("LOCALAPPDATA")
        if local_app_data:
            return Path(local_app_data)
        return Path.home() / "AppData" / "Local"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    data_home = environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home)
    return Path.home() / ".local" / "share"


class PathsResolver:
    """Compute Paths from the project location, python version and settings."""

    def __init__(
        self,
        project_path: Path,
        python_version: str,
        settings: Settings,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._project_path = project_path
        self._python_version = python_version
        self._settings = settings
        self._environ = os.environ if environ is None else environ

    def paths(self) -> Paths:
        paths = Paths(
            project=self._project_path,
            venv=self._venv_path(),
            lock=self._lock_path(),
            setup_py=self._project_path / "setup.py",
        )
        logger.debug("Resolved paths: %s", paths)
        return paths

    def _lock_path(self) -> Path:
        if self._settings.production:
            return self._project_path / PROD_LOCK_FILENAME
        return self._project_path / DEV_LOCK_FILENAME

    def _venv_path(self) -> Path:
        # An activated virtualenv always wins
        active = self._environ.get("VIRTUAL_ENV")
        if active:
            return Path(active)

        kind = "prod" if self._settings.production else "dev"
        if self._settings.venv_outside_project:
            data_dir = user_data_dir(self._environ)
            return (
                data_dir / "dmenv" / "venv" / kind / self._python_version / self._project_path.name
            )
        return self._project_path / ".venv" / kind / self._python_version
