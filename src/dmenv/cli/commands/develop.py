import click

from dmenv.cli.error_boundary import cli_error_boundary
from dmenv.core.context import DmenvContext


@click.command("develop")
@click.pass_obj
@cli_error_boundary
def develop_cmd(ctx: DmenvContext) -> None:
    """Run `setup.py develop` in the virtualenv."""
    ctx.project().develop()
