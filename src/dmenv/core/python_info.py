"""Discovery of the interpreter used to create virtualenvs."""

import logging
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path

from dmenv.core.errors import DmenvError, PythonNotFound
from dmenv.core.process import ProcessRunner

logger = logging.getLogger(__name__)

INFO_SCRIPT = "import sys; v = sys.version_info; print(sys.platform); print(f'{v[0]}.{v[1]}.{v[2]}')"


def default_python_name() -> str:
    return "python" if sys.platform == "win32" else "python3"


@dataclass(frozen=True)
class PythonInfo:
    """Interpreter binary with its version ("3.11.4") and sys.platform."""

    binary: Path
    version: str
    platform: str


def find_python(name: str | None) -> Path:
    """Resolve the python binary to use.

    A value containing a path separator is used as-is; anything else is
    looked up in PATH.
    """
    if name is None:
        name = default_python_name()
    candidate = Path(name)
    if candidate.parent != Path(".") and candidate.exists():
        return candidate
    found = shutil.which(name)
    if found is None:
        raise PythonNotFound(name)
    return Path(found)


def detect_python_info(runner: ProcessRunner, python: str | None) -> PythonInfo:
    """Ask the interpreter for its platform and version."""
    binary = find_python(python)
    output = runner.get_output([str(binary), "-c", INFO_SCRIPT])
    lines = output.strip().splitlines()
    if len(lines) != 2:
        raise DmenvError(f"Unexpected output from {binary}: {output!r}")
    platform, version = (line.strip() for line in lines)
    logger.debug("Using python %s (%s) from %s", version, platform, binary)
    return PythonInfo(binary=binary, version=version, platform=platform)
