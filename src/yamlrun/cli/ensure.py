"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

from pathlib import Path
from typing import TYPE_CHECKING

import click

from yamlrun.cli.output import user_output

if TYPE_CHECKING:
    from yamlrun.core.context import YamlrunContext


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def path_exists(path: Path, error_message: str | None = None) -> None:
        """Ensure path exists, otherwise output styled error and exit.

        Example:
            >>> Ensure.path_exists(ctx.layout.readme_path)
        """
        if not path.exists():
            if error_message is None:
                error_message = f"Path not found: {path}"
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def docker_daemon_running(ctx: "YamlrunContext") -> None:
        """Ensure the Docker daemon answers before talking to it."""
        if not ctx.docker.is_daemon_running():
            user_output(
                click.style("Error: ", fg="red")
                + "Docker daemon is not running - Start Docker and try again"
            )
            raise SystemExit(1)
