"""CLI commands: dsf-linter report / render -- replay a JSON report."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from dsf_linter.config import LinterConfig
from dsf_linter.errors import DsfLinterError
from dsf_linter.model.severity import severity_names
from dsf_linter.report.console import ConsolePrinter
from dsf_linter.report.json_report import load_json_report, write_json_report
from dsf_linter.report.output import DiagnosticOutput

_SEVERITY = click.Choice(severity_names(), case_sensitive=False)


def _load(path: str) -> DiagnosticOutput:
    try:
        return load_json_report(Path(path))
    except DsfLinterError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)


@click.command()
@click.argument("report_json", type=click.Path(exists=True, dir_okay=False))
@click.option("--min-severity", type=_SEVERITY, default="INFO", envvar="DSF_LINTER_MIN_SEVERITY",
              show_default=True, help="Hide items less severe than this.")
@click.option("--show-success", is_flag=True, envvar="DSF_LINTER_SHOW_SUCCESS",
              help="Also print SUCCESS items.")
@click.option("--fail-on", type=_SEVERITY, default=None, envvar="DSF_LINTER_FAIL_ON",
              help="Exit 1 when any item is at least this severe.")
@click.option("--no-fail", is_flag=True, help="Never exit 1 because of findings.")
@click.option("--color/--no-color", default=True, envvar="DSF_LINTER_COLOR",
              help="Colour output by severity.")
@click.option("--report-dir", type=click.Path(file_okay=False), default=None, envvar="DSF_LINTER_REPORT_DIR",
              help="Also write the filtered report as JSON into this directory.")
@click.option("--report-name", default=LinterConfig.json_report_name, envvar="DSF_LINTER_REPORT_NAME",
              show_default=True, help="File name of the exported JSON report.")
def report(
    report_json: str,
    min_severity: str,
    show_success: bool,
    fail_on: str | None,
    no_fail: bool,
    color: bool,
    report_dir: str | None,
    report_name: str,
) -> None:
    """Print a saved JSON report grouped by domain.

    Exits with code 1 when the gate fails, 2 when the report cannot be read.
    """
    output = _load(report_json)
    config = LinterConfig(
        mode=output.mode,
        fail_on=fail_on.upper() if fail_on else None,
        min_severity=min_severity.upper(),
        show_success=show_success,
        color=color,
        gate=not no_fail,
        report_dir=report_dir,
        json_report_name=report_name,
    )

    visible = [
        item
        for item in output.items
        if item.severity.value == "SUCCESS" or item.severity.is_at_least(config.min_severity)
    ]
    filtered = DiagnosticOutput(output.mode, visible)
    printer = ConsolePrinter(color=config.color, show_success=config.show_success)
    printer.print(filtered)

    export_path = config.report_path()
    if export_path is not None:
        try:
            written = write_json_report(filtered, export_path)
        except DsfLinterError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(2)
        click.echo(f"Report written to {written}")

    if config.gate and output.should_fail(config.fail_threshold()):
        sys.exit(1)


@click.command()
@click.argument("report_json", type=click.Path(exists=True, dir_okay=False))
def render(report_json: str) -> None:
    """Print one canonical line per item of a saved JSON report."""
    for item in _load(report_json):
        click.echo(item.render())
