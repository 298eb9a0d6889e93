"""Command to list declared libraries."""

import click

from yamlrun.cli.error_boundary import cli_error_boundary
from yamlrun.cli.output import machine_output
from yamlrun.core.context import YamlrunContext
from yamlrun.core.tables import format_library_table


@click.command("list")
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: YamlrunContext) -> None:
    """List declared libraries, sorted by id."""
    machine_output(format_library_table(ctx.registry))
