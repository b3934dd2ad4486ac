"""Project: every user-facing dmenv operation.

A Project is built from the project location, the interpreter and the
resolved settings. All paths are computed once by PathsResolver.

Only install(), lock() and tidy() create the virtualenv. Every other
operation that needs it calls _expect_venv() so that the error message is
the same everywhere.
"""

import logging
import sys
from pathlib import Path

from dmenv import __version__
from dmenv.cli.output import machine_output, print_info_1, print_info_2
from dmenv.core.dependencies import FrozenDependency
from dmenv.core.errors import CommandFailed, MissingLock, MissingSetupPy, PipUpgradeFailed
from dmenv.core.lock import LockOptions, Metadata
from dmenv.core.operations import init as init_ops
from dmenv.core.operations import lock as lock_ops
from dmenv.core.operations import scripts as scripts_ops
from dmenv.core.operations import venv as venv_ops
from dmenv.core.paths import Paths, PathsResolver
from dmenv.core.process import ProcessRunner
from dmenv.core.python_info import PythonInfo
from dmenv.core.settings import Settings
from dmenv.core.venv_runner import VenvRunner

logger = logging.getLogger(__name__)

# pip on Debian reports this bogus package, see https://bugs.debian.org/871790
IGNORED_FROZEN = {"pkg-resources"}


class Project:
    def __init__(
        self,
        project_path: Path,
        python_info: PythonInfo,
        settings: Settings,
        runner: ProcessRunner,
        paths: Paths | None = None,
    ) -> None:
        self.python_info = python_info
        self.settings = settings
        if paths is None:
            paths = PathsResolver(project_path, python_info.version, settings).paths()
        self.paths = paths
        self._runner = runner
        self._venv_runner = VenvRunner(paths.project, paths.venv, runner)

    def init(self, options: init_ops.InitOptions) -> None:
        """Create setup.py if it does not exist."""
        init_ops.init(self.paths.project, options)

    def clean(self) -> None:
        """Remove the virtualenv. No-op if it does not exist."""
        venv_ops.clean(self.paths.venv)

    def develop(self) -> None:
        """Run `setup.py develop`, as done at the end of install()."""
        print_info_2("Running setup.py develop")
        if not self.paths.setup_py.exists():
            raise MissingSetupPy()
        self._venv_runner.run("python", ["setup.py", "develop", "--no-deps"])

    def install(self, *, develop: bool = True, upgrade_pip: bool = True) -> None:
        """Install dependencies from the lock file.

        Raises:
            MissingLock: If the lock file (requirements.lock or production.lock)
                does not exist
        """
        print_info_1("Preparing project for development")
        if not self.paths.lock.exists():
            raise MissingLock(self.paths.lock)

        self._ensure_venv()
        if upgrade_pip:
            self.upgrade_pip()
        self._install_from_lock()
        if develop:
            self.develop()

    def lock(self, options: LockOptions) -> None:
        """(Re)generate the lock file from setup.py.

        pip is always upgraded first: if that fails the virtualenv is broken,
        and a recent pip is required for the freeze options used later.
        """
        print_info_1("Locking dependencies")
        if not self.paths.setup_py.exists():
            raise MissingSetupPy()
        # Fail on bad options before doing any work
        options.marker()
        self._ensure_venv()
        self.upgrade_pip()
        self._install_editable()
        self._lock_dependencies(options)

    def tidy(self, options: LockOptions) -> None:
        """Re-generate the lock file from a brand new virtualenv.

        Removes dependencies lingering in the old virtualenv that setup.py
        no longer requires.
        """
        print_info_1("Cleaning up lock file")
        if not self.paths.setup_py.exists():
            raise MissingSetupPy()
        self.clean()
        self.lock(options)

    def bump_in_lock(self, name: str, version: str, *, git: bool = False) -> bool:
        """Bump a dependency in the lock file.

        When git is True, version is a git reference (sha1, tag or branch).
        """
        print_info_1(f"Bumping {name} to {version}")
        return lock_ops.bump_in_lock(self.paths.lock, name, version, git, self.metadata())

    def upgrade_pip(self) -> None:
        print_info_2("Upgrading pip")
        try:
            self._venv_runner.run("python", ["-m", "pip", "install", "pip", "--upgrade"])
        except CommandFailed as e:
            raise PipUpgradeFailed() from e

    def run(self, args: list[str], *, no_exec: bool = False) -> int:
        """Run a program from the virtualenv.

        On Unix the current process is replaced, so the program receives
        signals directly and its exit code is the one of dmenv. On Windows,
        or with no_exec, a child process is spawned and its exit code
        returned.
        """
        self._expect_venv()
        cmd = self._venv_runner.command(args[0], args[1:])
        if no_exec or sys.platform == "win32":
            return self._venv_runner.run_status(cmd)
        self._venv_runner.exec(cmd)
        return 0

    def show_deps(self) -> None:
        """Show what is *actually* installed in the virtualenv."""
        self._expect_venv()
        self._venv_runner.run("python", ["-m", "pip", "list"])

    def show_outdated(self) -> None:
        self._expect_venv()
        self._venv_runner.run(
            "python", ["-m", "pip", "list", "--outdated", "--format", "columns"]
        )

    def show_venv_path(self) -> None:
        machine_output(str(self.paths.venv))

    def show_venv_bin_path(self) -> None:
        self._expect_venv()
        machine_output(str(self._venv_runner.binaries_path()))

    def process_scripts(self, *, force: bool = False, dest_dir: Path | None = None) -> list[Path]:
        self._expect_venv()
        if dest_dir is None:
            dest_dir = scripts_ops.user_bin_dir()
        return scripts_ops.create(
            self.paths.project, self._venv_runner.binaries_path(), dest_dir, force=force
        )

    def metadata(self) -> Metadata:
        return Metadata(
            dmenv_version=__version__,
            python_version=self.python_info.version,
            python_platform=self.python_info.platform,
        )

    def _ensure_venv(self) -> None:
        if self.paths.venv.exists():
            print_info_2(f"Using existing virtualenv: {self.paths.venv}")
            return
        venv_ops.create(self.paths.venv, self.python_info, self.settings, self._runner)

    def _expect_venv(self) -> None:
        venv_ops.expect(self.paths.venv)

    def _install_from_lock(self) -> None:
        print_info_2(f"Installing dependencies from {self.paths.lock}")
        # Commands run from the project directory, so the relative name is enough
        self._venv_runner.run(
            "python", ["-m", "pip", "install", "--requirement", self.paths.lock.name]
        )

    def _install_editable(self) -> None:
        extra = "prod" if self.settings.production else "dev"
        print_info_2(f"Installing deps from setup.py using '{extra}' extra dependencies")
        self._venv_runner.run("python", ["-m", "pip", "install", "--editable", f".[{extra}]"])

    def _lock_dependencies(self, options: LockOptions) -> None:
        frozen_deps = self._get_frozen_deps()
        lock_ops.lock_dependencies(self.paths.lock, frozen_deps, options, self.metadata())

    def _get_frozen_deps(self) -> list[FrozenDependency]:
        print_info_2(f"Generating {self.paths.lock}")
        output = self._venv_runner.get_output(
            "python", ["-m", "pip", "freeze", "--exclude-editable", "--all", "--local"]
        )
        lines = [line.strip() for line in output.splitlines()]
        # Skip blanks, pip warnings ("## ...") and editable installs
        deps = [
            FrozenDependency.from_string(line)
            for line in lines
            if line and not line.startswith(("#", "-"))
        ]
        kept = [dep for dep in deps if dep.name not in IGNORED_FROZEN]
        logger.debug("Frozen %d dependencies", len(kept))
        return kept
