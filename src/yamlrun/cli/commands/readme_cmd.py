"""Command to regenerate the library table in README.md."""

import click

from yamlrun.cli.ensure import Ensure
from yamlrun.cli.error_boundary import cli_error_boundary
from yamlrun.core.context import YamlrunContext
from yamlrun.core.tables import format_library_table, replace_readme_table


@click.command("update-readme")
@click.pass_obj
@cli_error_boundary
def update_readme_cmd(ctx: YamlrunContext) -> None:
    """Rewrite the library table in README.md."""
    readme_path = ctx.layout.readme_path
    Ensure.path_exists(readme_path, f"README not found at {readme_path}")

    readme = readme_path.read_text(encoding="utf-8")
    updated = replace_readme_table(readme, format_library_table(ctx.registry))
    if updated == readme:
        ctx.feedback.info(f"{readme_path.name} is up to date")
        return

    readme_path.write_text(updated, encoding="utf-8")
    ctx.feedback.success(f"Updated {readme_path.name}")
