"""Error types raised by dmenv operations.

Every failure the user can fix (missing files, failed commands, bad
configuration) is a DmenvError. The CLI error boundary turns them into a
styled one-line message; anything else bubbles up with a traceback.
"""

from pathlib import Path


class DmenvError(Exception):
    """Base class for all expected dmenv failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingSetupPy(DmenvError):
    def __init__(self) -> None:
        super().__init__("setup.py not found. You may want to run `dmenv init` now")


class SetupPyAlreadyExists(DmenvError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"{path} already exists. Aborting")
        self.path = path


class MissingLock(DmenvError):
    def __init__(self, expected_path: Path) -> None:
        super().__init__(f"{expected_path} does not exist. Please run `dmenv lock`")
        self.expected_path = expected_path


class VenvNotFound(DmenvError):
    def __init__(self, path: Path) -> None:
        super().__init__(
            f"virtualenv in {path} does not exist. Please run `dmenv lock` or `dmenv install`"
        )
        self.path = path


class VenvCreationFailed(DmenvError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Failed to create virtualenv in {path}")
        self.path = path


class BinaryNotFound(DmenvError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Cannot run: '{path}' does not exist")
        self.path = path


class PythonNotFound(DmenvError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Could not find {name} in PATH. Use --python to specify an interpreter")
        self.name = name


class PipUpgradeFailed(DmenvError):
    def __init__(self) -> None:
        super().__init__(
            "Could not upgrade pip. The virtualenv may be broken: try `dmenv clean`"
        )


class CommandFailed(DmenvError):
    """A subprocess exited with a non-zero status."""

    def __init__(self, cmd: list[str], returncode: int, details: str | None = None) -> None:
        cmd_str = " ".join(cmd)
        message = f"Command failed: {cmd_str}\nExit code: {returncode}"
        if details:
            message += f"\n{details}"
        super().__init__(message)
        self.cmd = cmd
        self.returncode = returncode


class DependencyNotFound(DmenvError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Dependency '{name}' not found in lock")
        self.name = name


class InvalidDependency(DmenvError):
    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"Could not parse '{line}': {reason}")
        self.line = line


class InvalidLockOption(DmenvError):
    pass


class ConfigError(DmenvError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Invalid config in {path}: {reason}")
        self.path = path
