"""DSF Linter CLI entry point: Click group with subcommands."""

import logging

import click

from dsf_linter import __version__


@click.group()
@click.version_option(version=__version__, prog_name="dsf-linter")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """DSF Linter - inspect diagnostics of DSF process plugins."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from dsf_linter.cli.report import render, report  # noqa: E402
from dsf_linter.cli.taxonomy import taxonomy  # noqa: E402

cli.add_command(taxonomy)
cli.add_command(report)
cli.add_command(render)
