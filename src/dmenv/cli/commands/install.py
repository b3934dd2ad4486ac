import click

from dmenv.cli.error_boundary import cli_error_boundary
from dmenv.core.context import DmenvContext


@click.command("install")
@click.option("--no-develop", is_flag=True, help="Do not run setup.py develop")
@click.option("--no-upgrade-pip", is_flag=True, help="Do not upgrade pip first")
@click.pass_obj
@cli_error_boundary
def install_cmd(ctx: DmenvContext, no_develop: bool, no_upgrade_pip: bool) -> None:
    """Install dependencies from the lock file."""
    ctx.project().install(develop=not no_develop, upgrade_pip=not no_upgrade_pip)
