"""Output utilities for CLI commands with clear intent.

- user_output: progress and error messages, routed to stderr
- machine_output: values meant to be consumed by scripts, routed to stdout
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a message meant for humans to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write a value meant for scripts to stdout."""
    click.echo(message, nl=nl)


def print_info_1(message: str) -> None:
    """Top-level step of an operation."""
    user_output(f"{click.style('::', fg='blue')} {message}")


def print_info_2(message: str) -> None:
    """Sub-step of an operation."""
    user_output(f"{click.style('->', fg='blue')} {message}")


def print_warning(message: str) -> None:
    user_output(f"{click.style('Warning:', fg='yellow')} {message}")


def print_error(message: str) -> None:
    user_output(click.style("Error: ", fg="red") + message)


def print_cmd(cmd: list[str]) -> None:
    """Echo a command line before running it."""
    user_output(f"{click.style('$', fg='blue')} {click.style(cmd[0], bold=True)} {' '.join(cmd[1:])}")
