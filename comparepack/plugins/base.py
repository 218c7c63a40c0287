"""Diff lifecycle event payloads and the no-op plugin base."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Literal

LifecycleStatus = Literal["ok", "error"]


@dataclass(frozen=True, slots=True)
class DiffStartEvent:
    mode: str
    ignore_case: bool
    trim: bool
    total_expected_lines: int
    total_current_lines: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class DiffEndEvent:
    mode: str
    status: LifecycleStatus
    identical: bool | None = None
    summary: dict[str, int] | None = None
    missing_count: int | None = None
    extra_count: int | None = None
    error_type: str | None = None
    error_message: str | None = None

    @property
    def failed(self) -> bool:
        return self.status == "error"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class LifecyclePlugin:
    """Base plugin; override the hooks you need."""

    name = "lifecycle-plugin"

    def on_diff_start(self, event: DiffStartEvent) -> None:
        return None

    def on_diff_end(self, event: DiffEndEvent) -> None:
        return None
