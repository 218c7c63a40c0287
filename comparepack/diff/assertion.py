"""Assertion helpers for CI-oriented text checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from comparepack.diff.engine import diff_lines
from comparepack.diff.models import DiffResult


@dataclass(slots=True)
class AssertionResult:
    """Outcome of an expected vs current line assertion."""

    diff: DiffResult

    @property
    def passed(self) -> bool:
        return self.diff.identical

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": "pass" if self.passed else "fail",
            "exit_code": self.exit_code,
            "mode": self.diff.mode,
            "total_expected_lines": self.diff.total_expected_lines,
            "total_current_lines": self.diff.total_current_lines,
            "summary": self.diff.summary(),
            "missing_count": len(self.diff.missing_lines),
            "extra_count": len(self.diff.extra_lines),
            "missing_lines": list(self.diff.missing_lines),
            "extra_lines": list(self.diff.extra_lines),
        }


def assert_lines(
    expected: Sequence[str],
    current: Sequence[str],
    *,
    ordered: bool = False,
    ignore_case: bool = False,
    trim: bool = False,
) -> AssertionResult:
    """Compare expected vs current lines and return the assertion outcome."""
    return AssertionResult(
        diff=diff_lines(
            expected,
            current,
            ordered=ordered,
            ignore_case=ignore_case,
            trim=trim,
        )
    )
