import click

from dmenv.cli.error_boundary import cli_error_boundary
from dmenv.core.context import DmenvContext


@click.command("upgrade-pip")
@click.pass_obj
@cli_error_boundary
def upgrade_pip_cmd(ctx: DmenvContext) -> None:
    """Upgrade pip in the virtualenv."""
    ctx.project().upgrade_pip()
