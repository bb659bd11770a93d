"""JSON persistence of a diagnostic output."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from dsf_linter.errors import ReportError
from dsf_linter.model.item import restore
from dsf_linter.model.mode import AnalysisMode
from dsf_linter.report.output import DiagnosticOutput

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def report_document(
    output: DiagnosticOutput,
    *,
    plugin_name: str | None = None,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Build the JSON document for *output*."""
    stamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    return {
        "timestamp": stamp,
        "mode": output.mode.value,
        "pluginName": plugin_name,
        "summary": {
            "errorCount": output.error_count,
            "warningCount": output.warning_count,
            "infoCount": output.info_count,
            "successCount": output.success_count,
            "totalItems": output.total,
        },
        "items": [item.to_dict() for item in output.items],
    }


def write_json_report(
    output: DiagnosticOutput,
    path: Path | str,
    *,
    plugin_name: str | None = None,
    now: datetime | None = None,
) -> Path:
    """Serialise *output* to *path*, creating parent directories."""
    target = Path(path)
    document = report_document(output, plugin_name=plugin_name, now=now)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(document, indent=2), encoding="utf-8")
    except OSError as exc:
        raise ReportError(f"cannot write report ({exc.strerror})", str(target)) from exc
    logger.info("wrote %d item(s) to %s", output.total, target)
    return target


def load_json_report(path: Path | str) -> DiagnosticOutput:
    """Read a report written by :func:`write_json_report`."""
    # Registers every variant with the model's registry.
    import dsf_linter.items  # noqa: F401

    source = Path(path)
    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ReportError(f"cannot read report ({exc.strerror})", str(source)) from exc
    except json.JSONDecodeError as exc:
        raise ReportError(f"invalid JSON ({exc.msg} at line {exc.lineno})", str(source)) from exc

    if not isinstance(data, dict):
        raise ReportError("report must be a JSON object", str(source))
    try:
        mode = AnalysisMode(data.get("mode"))
    except ValueError as exc:
        raise ReportError(f"unknown mode {data.get('mode')!r}", str(source)) from exc
    raw_items = data.get("items", [])
    if not isinstance(raw_items, list) or not all(isinstance(entry, dict) for entry in raw_items):
        raise ReportError("'items' must be a list of objects", str(source))

    try:
        items = [restore(entry) for entry in raw_items]
        return DiagnosticOutput(mode, items)
    except ReportError as exc:
        raise ReportError(exc.reason, str(source)) from exc
    except ValueError as exc:
        raise ReportError(str(exc), str(source)) from exc
