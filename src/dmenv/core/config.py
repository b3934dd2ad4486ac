"""User configuration loaded from ~/.config/dmenv/config.toml.

Example:

    python = "/usr/bin/python3.11"
    venv_outside_project = true
    system_site_packages = false
"""

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from dmenv.core.errors import ConfigError


class DmenvConfig(BaseModel):
    """Immutable user configuration. Every key is optional."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    python: str | None = None
    venv_outside_project: bool = False
    system_site_packages: bool = False

    @field_validator("python")
    @classmethod
    def validate_python(cls, v: str | None) -> str | None:
        """Validate python is non-empty when given."""
        if v is not None and not v.strip():
            msg = "python cannot be empty"
            raise ValueError(msg)
        return v


def config_path(environ: Mapping[str, str]) -> Path:
    """Get the path of the config file, honoring XDG_CONFIG_HOME."""
    config_home = environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "dmenv" / "config.toml"
    return Path.home() / ".config" / "dmenv" / "config.toml"


def load_config(path: Path | None = None, environ: Mapping[str, str] | None = None) -> DmenvConfig:
    """Load the user config file.

    Args:
        path: Config file path (defaults to config_path())
        environ: Environment used to locate the file (defaults to os.environ)

    Returns:
        DmenvConfig with loaded values, or defaults if the file does not exist

    Raises:
        ConfigError: If the file is not valid TOML or has unknown/invalid keys
    """
    if path is None:
        path = config_path(os.environ if environ is None else environ)

    if not path.exists():
        return DmenvConfig()

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(path, str(e)) from e

    try:
        return DmenvConfig.model_validate(data)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(path, errors) from e
