"""Output utilities for CLI commands with clear intent.

user_output: diagnostics and progress for the user (stderr)
machine_output: results another program may consume (stdout)
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write user-facing diagnostics to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write command results to stdout."""
    click.echo(message, nl=nl)
