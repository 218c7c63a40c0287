"""Bundled plugins: an NDJSON diff trace and in-memory diff counters."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from comparepack.plugins.base import DiffEndEvent, DiffStartEvent, LifecyclePlugin


@dataclass(slots=True)
class DiffTracePlugin(LifecyclePlugin):
    """Appends one JSON line per diff hook to ``output_path``."""

    output_path: str | Path
    name: str = "diff-trace"

    def on_diff_start(self, event: DiffStartEvent) -> None:
        self._write({"hook": "on_diff_start", "event": event.to_dict()})

    def on_diff_end(self, event: DiffEndEvent) -> None:
        self._write({"hook": "on_diff_end", "event": event.to_dict()})

    def _write(self, record: dict) -> None:
        path = Path(self.output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        line = json.dumps(record, ensure_ascii=True, sort_keys=True, separators=(",", ":"))
        with path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")


@dataclass(slots=True)
class DiffStatsPlugin(LifecyclePlugin):
    """Counts diffs and sums their row summaries."""

    name: str = "diff-stats"
    diffs_started: int = 0
    diffs_completed: int = 0
    diffs_failed: int = 0
    identical: int = 0
    totals: dict[str, int] = field(
        default_factory=lambda: {"same": 0, "added": 0, "removed": 0}
    )

    def on_diff_start(self, event: DiffStartEvent) -> None:
        self.diffs_started += 1

    def on_diff_end(self, event: DiffEndEvent) -> None:
        if event.failed:
            self.diffs_failed += 1
            return
        self.diffs_completed += 1
        if event.identical:
            self.identical += 1
        for key, count in (event.summary or {}).items():
            self.totals[key] = self.totals.get(key, 0) + count
