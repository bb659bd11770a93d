"""CLI command: dsf-linter taxonomy -- list finding types and variants."""

from __future__ import annotations

import click

from dsf_linter.model.item import variant_registry
from dsf_linter.model.mode import AnalysisMode


@click.command()
@click.option(
    "--mode",
    "mode_name",
    type=click.Choice([mode.value for mode in AnalysisMode]),
    default=AnalysisMode.LINT.value,
    show_default=True,
    help="Which taxonomy to list.",
)
@click.option("--variants", is_flag=True, help="List diagnostic variants instead of finding types.")
def taxonomy(mode_name: str, variants: bool) -> None:
    """Print the closed finding-type taxonomy of one analysis mode."""
    import dsf_linter.items  # noqa: F401

    mode = AnalysisMode(mode_name)
    if not variants:
        for finding_type in mode.finding_types:
            click.echo(f"{finding_type.value}: {finding_type.default_message}")
        return

    registry = variant_registry()
    for name in sorted(registry):
        cls = registry[name]
        if cls.mode is mode:
            click.echo(f"{name} [{cls.default_severity.value}] {cls.finding_type.value}")
