import click

from dmenv.cli.error_boundary import cli_error_boundary
from dmenv.core.context import DmenvContext


@click.command("process-scripts")
@click.option("--force", is_flag=True, help="Overwrite existing scripts")
@click.pass_obj
@cli_error_boundary
def process_scripts_cmd(ctx: DmenvContext, force: bool) -> None:
    """Expose the project's console scripts in ~/.local/bin."""
    ctx.project().process_scripts(force=force)
