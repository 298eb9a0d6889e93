"""Command to download upstream source archives."""

import click

from yamlrun.cli.error_boundary import cli_error_boundary
from yamlrun.core.context import YamlrunContext


@click.command("fetch-sources")
@click.argument("library", required=False)
@click.pass_obj
@cli_error_boundary
def fetch_sources_cmd(ctx: YamlrunContext, library: str | None) -> None:
    """Download the source of LIBRARY, or of every library.

    Archives that already exist locally are skipped.
    """
    if library is not None:
        library_ids = [library]
        # Unknown ids fail before anything is downloaded
        ctx.registry.lookup(library)
    else:
        library_ids = ctx.registry.sorted_ids()

    fetcher = ctx.source_fetcher()
    failed: list[str] = []
    for library_id in library_ids:
        ctx.feedback.info(library_id)
        if not fetcher.ensure_source(ctx.registry.lookup(library_id)):
            failed.append(library_id)

    if failed:
        ctx.feedback.error(f"Failed to fetch sources for: {', '.join(failed)}")
        raise SystemExit(1)
