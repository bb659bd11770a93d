"""Thread-safe accumulation of findings while checks run."""

from __future__ import annotations

import logging
import threading
from typing import Iterable

from dsf_linter.errors import ModeMismatchError
from dsf_linter.model.item import DiagnosticItem
from dsf_linter.model.mode import AnalysisMode
from dsf_linter.report.output import DiagnosticOutput

logger = logging.getLogger(__name__)


class FindingCollector:
    """Append-only sink shared by the checks of one run.

    Many producers may call :meth:`add` concurrently; the single consumer
    calls :meth:`to_output` once they are done.
    """

    def __init__(self, mode: AnalysisMode) -> None:
        self._lock = threading.Lock()
        self._mode = mode
        self._items: list[DiagnosticItem] = []

    @property
    def mode(self) -> AnalysisMode:
        return self._mode

    # --- write ----------------------------------------------------------------

    def add(self, item: DiagnosticItem) -> None:
        """Record *item*; it must belong to this collector's mode."""
        if item.mode is not self._mode:
            raise ModeMismatchError(self._mode.value, item.variant)
        with self._lock:
            self._items.append(item)
        logger.debug("collected %s", item.variant)

    def extend(self, items: Iterable[DiagnosticItem]) -> None:
        for item in items:
            self.add(item)

    # --- read -----------------------------------------------------------------

    def snapshot(self) -> list[DiagnosticItem]:
        """Return a copy of the items collected so far."""
        with self._lock:
            return list(self._items)

    def to_output(self) -> DiagnosticOutput:
        items = self.snapshot()
        logger.info("collected %d %s item(s)", len(items), self._mode.value)
        return DiagnosticOutput(self._mode, items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
