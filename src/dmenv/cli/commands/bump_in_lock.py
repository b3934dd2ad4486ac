import click

from dmenv.cli.error_boundary import cli_error_boundary
from dmenv.core.context import DmenvContext


@click.command("bump-in-lock")
@click.argument("name")
@click.argument("version")
@click.option("--git", is_flag=True, help="VERSION is a git reference (sha1, tag, branch)")
@click.pass_obj
@cli_error_boundary
def bump_in_lock_cmd(ctx: DmenvContext, name: str, version: str, git: bool) -> None:
    """Bump a dependency in the lock file."""
    ctx.project().bump_in_lock(name, version, git=git)
