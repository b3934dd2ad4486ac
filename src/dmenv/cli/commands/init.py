"""Init command implementation - generates setup.py."""

import click

from dmenv.cli.error_boundary import cli_error_boundary
from dmenv.core.context import DmenvContext
from dmenv.core.operations.init import InitOptions


@click.command("init")
@click.argument("name", required=False)
@click.option("--version", "version", default="0.1.0", show_default=True, help="Initial version")
@click.option("--author", help="Author of the project")
@click.option("--no-setup-cfg", is_flag=True, help="Do not generate setup.cfg")
@click.pass_obj
@cli_error_boundary
def init_cmd(
    ctx: DmenvContext, name: str | None, version: str, author: str | None, no_setup_cfg: bool
) -> None:
    """Initialize a new project.

    NAME defaults to the name of the project directory.
    """
    # No setup.py yet: don't look for one in parent directories
    project_path = ctx.options.project.resolve() if ctx.options.project is not None else ctx.cwd
    options = InitOptions(
        name=name if name is not None else project_path.name,
        version=version,
        author=author,
        setup_cfg=not no_setup_cfg,
    )
    ctx.project(project_path).init(options)
