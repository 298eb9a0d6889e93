"""Command to show runtime images and the library versions installed in them."""

import click
from rich.console import Console
from rich.text import Text

from yamlrun.cli.ensure import Ensure
from yamlrun.cli.error_boundary import cli_error_boundary
from yamlrun.cli.output import user_output
from yamlrun.core.context import YamlrunContext
from yamlrun.core.inventory import LibraryRow, RuntimeReport

IMAGE_FORMAT = "{:<25} | {:<5} | {:<12} | {} | {}"
ROW_FORMAT = "{:>2} {:<17} {:<20} {:<10} {:<7} | {:<8}"
EMPTY_ROW = ROW_FORMAT.format("", "", "", "", "", "")


def format_image_line(report: RuntimeReport) -> str:
    """Format the header line of a runtime: image, tag, id, created, size."""
    if report.image is None:
        return IMAGE_FORMAT.format(report.image_name, "-", "-", "-", "-")
    summary = report.image.summary
    return IMAGE_FORMAT.format(
        summary.repository, summary.tag, summary.id, summary.created, summary.size
    )


def format_library_row(row: LibraryRow) -> str:
    """Format one library: id, name, language, declared and installed version."""
    return ROW_FORMAT.format(
        "",
        row.id,
        row.name,
        row.lang,
        row.declared_version,
        row.installed_version if row.installed_version is not None else "-",
    )


def _row_style(row: LibraryRow) -> str | None:
    if row.installed_version is None:
        return "dim"
    if row.installed_version != row.declared_version:
        return "yellow"
    return None


@click.command("list-images")
@click.pass_obj
@cli_error_boundary
def list_images_cmd(ctx: YamlrunContext) -> None:
    """Show runtime images with installed and declared library versions."""
    Ensure.docker_daemon_running(ctx)

    try:
        reports = ctx.inventory().collect()
    except RuntimeError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e

    console = Console(highlight=False, soft_wrap=True)
    for report in reports:
        console.print(Text(format_image_line(report), style="bold"))
        for row in report.rows:
            console.print(Text(format_library_row(row), style=_row_style(row) or ""))
        console.print(Text(EMPTY_ROW))
