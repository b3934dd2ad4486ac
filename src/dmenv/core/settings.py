"""Settings resolved from command line flags, environment and config file."""

from collections.abc import Mapping
from dataclasses import dataclass

from dmenv.core.config import DmenvConfig

VENV_OUTSIDE_PROJECT_ENV = "DMENV_VENV_OUTSIDE_PROJECT"
PYTHON_ENV = "DMENV_PYTHON"

FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """How the project's virtualenv is laid out and created."""

    production: bool
    system_site_packages: bool
    venv_outside_project: bool

    @staticmethod
    def resolve(
        *,
        config: DmenvConfig,
        environ: Mapping[str, str],
        production: bool,
        system_site_packages: bool,
    ) -> "Settings":
        """Merge the sources, flags first, then environment, then config file."""
        venv_outside_project = config.venv_outside_project
        from_env = environ.get(VENV_OUTSIDE_PROJECT_ENV)
        if from_env:
            venv_outside_project = from_env.strip().lower() not in FALSE_VALUES

        return Settings(
            production=production,
            system_site_packages=system_site_packages or config.system_site_packages,
            venv_outside_project=venv_outside_project,
        )


def resolve_python(
    *, flag: str | None, config: DmenvConfig, environ: Mapping[str, str]
) -> str | None:
    """Pick the interpreter requested by the user, if any."""
    if flag:
        return flag
    from_env = environ.get(PYTHON_ENV)
    if from_env:
        return from_env
    return config.python
