"""Data models for line diff results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

DiffType = Literal["same", "added", "removed"]
DiffMode = Literal["ordered", "unordered"]

DIFF_TYPES: tuple[str, ...] = ("same", "added", "removed")
DIFF_MODES: tuple[str, ...] = ("ordered", "unordered")


@dataclass(slots=True)
class DiffEntry:
    """One aligned row of a line diff.

    ``text`` is the row's display text: the expected side for ``same`` and
    ``removed`` rows, the current side for ``added`` rows. Both per-side texts
    stay available through ``expected_text`` and ``current_text`` so that a
    ``same`` row matched under case or whitespace normalization still carries
    the actual current line.
    """

    text: str
    type: DiffType
    original_index: int | None = None
    current_index: int | None = None
    expected_text: str | None = None
    current_text: str | None = None

    @classmethod
    def same(
        cls,
        *,
        expected_text: str,
        current_text: str,
        original_index: int,
        current_index: int,
    ) -> DiffEntry:
        return cls(
            text=expected_text,
            type="same",
            original_index=original_index,
            current_index=current_index,
            expected_text=expected_text,
            current_text=current_text,
        )

    @classmethod
    def removed(cls, *, expected_text: str, original_index: int) -> DiffEntry:
        return cls(
            text=expected_text,
            type="removed",
            original_index=original_index,
            expected_text=expected_text,
        )

    @classmethod
    def added(cls, *, current_text: str, current_index: int) -> DiffEntry:
        return cls(
            text=current_text,
            type="added",
            current_index=current_index,
            current_text=current_text,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "type": self.type,
            "original_index": self.original_index,
            "current_index": self.current_index,
            "expected_text": self.expected_text,
            "current_text": self.current_text,
        }


@dataclass(slots=True)
class DiffResult:
    """Structured diff for two line sequences."""

    mode: DiffMode
    entries: list[DiffEntry] = field(default_factory=list)
    missing_lines: list[str] = field(default_factory=list)
    extra_lines: list[str] = field(default_factory=list)
    ignore_case: bool = False
    trim: bool = False

    @property
    def identical(self) -> bool:
        return not self.missing_lines and not self.extra_lines

    @property
    def total_expected_lines(self) -> int:
        return sum(1 for entry in self.entries if entry.original_index is not None)

    @property
    def total_current_lines(self) -> int:
        return sum(1 for entry in self.entries if entry.current_index is not None)

    def summary(self) -> dict[str, int]:
        counts = dict.fromkeys(DIFF_TYPES, 0)
        for entry in self.entries:
            counts[entry.type] += 1
        return counts

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode,
            "ignore_case": self.ignore_case,
            "trim": self.trim,
            "identical": self.identical,
            "total_expected_lines": self.total_expected_lines,
            "total_current_lines": self.total_current_lines,
            "summary": self.summary(),
            "missing_lines": list(self.missing_lines),
            "extra_lines": list(self.extra_lines),
            "entries": [entry.to_dict() for entry in self.entries],
        }
