import logging
from dataclasses import replace
from pathlib import Path

import click

from dmenv.cli.commands.bump_in_lock import bump_in_lock_cmd
from dmenv.cli.commands.clean import clean_cmd
from dmenv.cli.commands.develop import develop_cmd
from dmenv.cli.commands.init import init_cmd
from dmenv.cli.commands.install import install_cmd
from dmenv.cli.commands.lock import lock_cmd, tidy_cmd
from dmenv.cli.commands.process_scripts import process_scripts_cmd
from dmenv.cli.commands.run import run_cmd
from dmenv.cli.commands.show import (
    show_bin_path_cmd,
    show_deps_cmd,
    show_outdated_cmd,
    show_venv_path_cmd,
)
from dmenv.cli.commands.upgrade_pip import upgrade_pip_cmd
from dmenv.cli.error_boundary import cli_error_boundary
from dmenv.core.context import GlobalOptions, create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_ENV = "DMENV_DEBUG"


def configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="dmenv")
@click.option(
    "--project",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Path to the project (defaults to the nearest directory containing setup.py)",
)
@click.option("--python", "python", help="Python interpreter used to create the virtualenv")
@click.option("--production", is_flag=True, help="Use production.lock and the 'prod' extra")
@click.option(
    "--system-site-packages",
    is_flag=True,
    help="Give the virtualenv access to the system site-packages",
)
@click.pass_context
@cli_error_boundary
def cli(
    ctx: click.Context,
    project: Path | None,
    python: str | None,
    production: bool,
    system_site_packages: bool,
) -> None:
    """Simple and practical virtualenv manager for Python."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    configure_logging(bool(ctx.obj.environ.get(DEBUG_ENV)))
    ctx.obj = replace(
        ctx.obj,
        options=GlobalOptions(
            project=project,
            python=python,
            production=production,
            system_site_packages=system_site_packages,
        ),
    )


# Register all commands
cli.add_command(bump_in_lock_cmd)
cli.add_command(clean_cmd)
cli.add_command(develop_cmd)
cli.add_command(init_cmd)
cli.add_command(install_cmd)
cli.add_command(lock_cmd)
cli.add_command(process_scripts_cmd)
cli.add_command(run_cmd)
cli.add_command(show_bin_path_cmd)
cli.add_command(show_deps_cmd)
cli.add_command(show_outdated_cmd)
cli.add_command(show_venv_path_cmd)
cli.add_command(tidy_cmd)
cli.add_command(upgrade_pip_cmd)


def main() -> None:
    """CLI entry point used by the `dmenv` console script."""
    cli()
