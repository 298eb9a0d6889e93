import logging
import os

import click

from yamlrun.cli.commands.build_cmd import build_cmd
from yamlrun.cli.commands.fetch_cmd import fetch_sources_cmd
from yamlrun.cli.commands.images_cmd import list_images_cmd
from yamlrun.cli.commands.list_cmd import list_cmd
from yamlrun.cli.commands.readme_cmd import update_readme_cmd
from yamlrun.cli.error_boundary import cli_error_boundary
from yamlrun.cli.help_formatter import GroupedCommandGroup
from yamlrun.core.constants import DEBUG_ENV_VAR
from yamlrun.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(cls=GroupedCommandGroup, context_settings=CONTEXT_SETTINGS)
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context) -> None:
    """Fetch, build and inventory third-party libraries for runtime images.

    \b
    Examples:
        yamlrun build c-libyaml
        yamlrun fetch-sources
        yamlrun fetch-sources c-libyaml
    """
    if os.getenv(DEBUG_ENV_VAR):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()


cli.add_command(build_cmd)
cli.add_command(fetch_sources_cmd)
cli.add_command(list_cmd)
cli.add_command(update_readme_cmd)
cli.add_command(list_images_cmd)


def main() -> None:
    """CLI entry point used by the `yamlrun` console script."""
    cli()
