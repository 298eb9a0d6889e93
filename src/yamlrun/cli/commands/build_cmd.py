"""Command to build one library in its builder container."""

import click

from yamlrun.cli.error_boundary import cli_error_boundary
from yamlrun.core.context import YamlrunContext
from yamlrun.core.reconcile import ReconcileOutcome


@click.command("build")
@click.argument("library", required=False)
@click.pass_obj
@cli_error_boundary
def build_cmd(ctx: YamlrunContext, library: str | None) -> None:
    """Build LIBRARY unless its declared version is already installed.

    Without LIBRARY nothing is built.
    """
    if library is None:
        ctx.feedback.info("No library given, nothing to build")
        return

    outcome = ctx.reconciler().reconcile(library)
    if outcome is ReconcileOutcome.FAILED:
        raise SystemExit(1)
