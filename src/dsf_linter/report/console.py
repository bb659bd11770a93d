"""Human-readable console report."""

from __future__ import annotations

from typing import Callable

import click

from dsf_linter.model.item import DiagnosticItem
from dsf_linter.report.output import DiagnosticOutput

_COLORS = {"ERROR": "red", "WARN": "yellow", "INFO": "blue", "SUCCESS": "green"}


class ConsolePrinter:
    """Print an output grouped by domain, one canonical line per item."""

    def __init__(
        self,
        color: bool = True,
        show_success: bool = False,
        out: Callable[[str], None] = click.echo,
    ) -> None:
        self.color = color
        self.show_success = show_success
        self._out = out

    def print(self, output: DiagnosticOutput) -> None:
        for label, items in output.by_domain().items():
            self._print_section(label, items)
        self._out(
            f"Summary: {output.error_count} error(s), {output.warning_count} warning(s), "
            f"{output.info_count} info(s), {output.success_count} success(es)"
        )

    def _print_section(self, label: str, items: list[DiagnosticItem]) -> None:
        issues = [item for item in items if item.severity.value != "SUCCESS"]
        shown = items if self.show_success else issues
        if not shown:
            self._out(f"No {label} issues found.")
            return

        errors = sum(1 for item in issues if item.severity.value == "ERROR")
        warnings = sum(1 for item in issues if item.severity.value == "WARN")
        infos = len(issues) - errors - warnings
        self._out(
            f"Found {len(issues)} {label} issue(s): "
            f"({errors} errors, {warnings} warnings, {infos} infos)"
        )
        for item in shown:
            self._out(self._style(item))

    def _style(self, item: DiagnosticItem) -> str:
        line = item.render()
        if not self.color:
            return line
        return click.style(line, fg=_COLORS[item.severity.value])
