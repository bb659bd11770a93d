"""Collecting, ordering and reporting diagnostic items."""

from dsf_linter.report.collector import FindingCollector
from dsf_linter.report.console import ConsolePrinter
from dsf_linter.report.json_report import load_json_report, report_document, write_json_report
from dsf_linter.report.output import DiagnosticOutput

__all__ = [
    "FindingCollector",
    "DiagnosticOutput",
    "ConsolePrinter",
    "report_document",
    "write_json_report",
    "load_json_report",
]
