"""show:* commands - information about the virtualenv."""

import click

from dmenv.cli.error_boundary import cli_error_boundary
from dmenv.core.context import DmenvContext


@click.command("show:deps")
@click.pass_obj
@cli_error_boundary
def show_deps_cmd(ctx: DmenvContext) -> None:
    """Show the dependencies installed in the virtualenv."""
    ctx.project().show_deps()


@click.command("show:outdated")
@click.pass_obj
@cli_error_boundary
def show_outdated_cmd(ctx: DmenvContext) -> None:
    """Show outdated dependencies."""
    ctx.project().show_outdated()


@click.command("show:venv-path")
@click.pass_obj
@cli_error_boundary
def show_venv_path_cmd(ctx: DmenvContext) -> None:
    """Show the path of the virtualenv."""
    ctx.project().show_venv_path()


@click.command("show:bin-path")
@click.pass_obj
@cli_error_boundary
def show_bin_path_cmd(ctx: DmenvContext) -> None:
    """Show the path of the virtualenv's binaries directory."""
    ctx.project().show_venv_bin_path()
