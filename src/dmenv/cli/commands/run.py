import click

from dmenv.cli.error_boundary import cli_error_boundary
from dmenv.core.context import DmenvContext


@click.command(
    "run",
    context_settings=dict(ignore_unknown_options=True, allow_interspersed_args=False),
)
@click.option(
    "--no-exec",
    is_flag=True,
    help="Spawn a child process instead of replacing dmenv (always the case on Windows)",
)
@click.argument("args", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_obj
@cli_error_boundary
def run_cmd(ctx: DmenvContext, no_exec: bool, args: tuple[str, ...]) -> None:
    """Run a program from the virtualenv.

    Use `--` to separate dmenv options from the program's:
    `dmenv run -- pytest -k foo`
    """
    returncode = ctx.project().run(list(args), no_exec=no_exec)
    if returncode != 0:
        raise SystemExit(returncode)
