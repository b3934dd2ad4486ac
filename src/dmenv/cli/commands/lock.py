"""Lock and tidy commands - (re)generate the lock file."""

import click

from dmenv.cli.error_boundary import cli_error_boundary
from dmenv.core.context import DmenvContext
from dmenv.core.lock import LockOptions

python_version_option = click.option(
    "--python-version",
    help="Restrict new dependencies to some python versions (e.g. '< 3.8')",
)
sys_platform_option = click.option(
    "--sys-platform",
    help="Restrict new dependencies to a platform (e.g. 'win32')",
)


@click.command("lock")
@python_version_option
@sys_platform_option
@click.pass_obj
@cli_error_boundary
def lock_cmd(ctx: DmenvContext, python_version: str | None, sys_platform: str | None) -> None:
    """Generate the lock file from setup.py."""
    options = LockOptions(python_version=python_version, sys_platform=sys_platform)
    ctx.project().lock(options)


@click.command("tidy")
@python_version_option
@sys_platform_option
@click.pass_obj
@cli_error_boundary
def tidy_cmd(ctx: DmenvContext, python_version: str | None, sys_platform: str | None) -> None:
    """Re-generate the lock file from a fresh virtualenv."""
    options = LockOptions(python_version=python_version, sys_platform=sys_platform)
    ctx.project().tidy(options)
