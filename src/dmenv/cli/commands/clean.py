import click

from dmenv.cli.error_boundary import cli_error_boundary
from dmenv.core.context import DmenvContext


@click.command("clean")
@click.pass_obj
@cli_error_boundary
def clean_cmd(ctx: DmenvContext) -> None:
    """Remove the virtualenv."""
    ctx.project().clean()
