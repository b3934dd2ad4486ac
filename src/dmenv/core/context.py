"""Application context with dependency injection."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from dmenv.core.config import DmenvConfig, load_config
from dmenv.core.paths import PathsResolver, find_project_path
from dmenv.core.process import ProcessRunner, RealProcessRunner
from dmenv.core.project import Project
from dmenv.core.python_info import PythonInfo, detect_python_info
from dmenv.core.settings import Settings, resolve_python


@dataclass(frozen=True)
class GlobalOptions:
    """Options given before the command name (`dmenv --production install`)."""

    project: Path | None = None
    python: str | None = None
    production: bool = False
    system_site_packages: bool = False


@dataclass(frozen=True)
class DmenvContext:
    """Immutable context holding all dependencies for dmenv operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    Note: python_info is None in production, where it is detected by
    running the interpreter. Tests set it to skip the detection.
    """

    runner: ProcessRunner
    cwd: Path  # Current working directory at CLI invocation
    environ: Mapping[str, str]
    config: DmenvConfig
    options: GlobalOptions = field(default_factory=GlobalOptions)
    python_info: PythonInfo | None = None

    def settings(self) -> Settings:
        return Settings.resolve(
            config=self.config,
            environ=self.environ,
            production=self.options.production,
            system_site_packages=self.options.system_site_packages,
        )

    def project_path(self) -> Path:
        if self.options.project is not None:
            return self.options.project.resolve()
        return find_project_path(self.cwd)

    def resolve_python_info(self) -> PythonInfo:
        if self.python_info is not None:
            return self.python_info
        python = resolve_python(flag=self.options.python, config=self.config, environ=self.environ)
        return detect_python_info(self.runner, python)

    def project(self, project_path: Path | None = None) -> Project:
        """Build the Project the current command operates on.

        project_path skips the lookup of setup.py, for commands such as init
        that run before it exists.
        """
        if project_path is None:
            project_path = self.project_path()
        python_info = self.resolve_python_info()
        settings = self.settings()
        paths = PathsResolver(project_path, python_info.version, settings, self.environ).paths()
        return Project(project_path, python_info, settings, self.runner, paths=paths)

    @staticmethod
    def for_test(
        runner: ProcessRunner | None = None,
        cwd: Path | None = None,
        environ: Mapping[str, str] | None = None,
        config: DmenvConfig | None = None,
        options: GlobalOptions | None = None,
        python_info: PythonInfo | None = None,
    ) -> "DmenvContext":
        """Create test context with fakes for every unspecified value.

        Args:
            runner: Optional ProcessRunner. If None, creates empty FakeProcessRunner.
            cwd: Optional current working directory. If None, uses
                Path("/test/default/cwd") to prevent accidental use of Path.cwd().
            environ: Optional environment. If None, uses an empty mapping.
            config: Optional DmenvConfig. If None, uses defaults.
            options: Optional GlobalOptions. If None, uses defaults.
            python_info: Optional PythonInfo. If None, uses python 3.11.4 on linux.

        Returns:
            DmenvContext configured with provided values and test defaults
        """
        from tests.fakes.process_runner import FakeProcessRunner

        if runner is None:
            runner = FakeProcessRunner()
        if python_info is None:
            python_info = PythonInfo(binary=Path("/usr/bin/python3"), version="3.11.4", platform="linux")

        return DmenvContext(
            runner=runner,
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
            environ=environ if environ is not None else {},
            config=config if config is not None else DmenvConfig(),
            options=options if options is not None else GlobalOptions(),
            python_info=python_info,
        )


def create_context() -> DmenvContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.
    """
    environ = dict(os.environ)
    return DmenvContext(
        runner=RealProcessRunner(),
        cwd=Path.cwd(),
        environ=environ,
        config=load_config(environ=environ),
    )
