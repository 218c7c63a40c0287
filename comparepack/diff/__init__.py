"""Diff subsystem for line comparison."""

from comparepack.diff.assertion import AssertionResult, assert_lines
from comparepack.diff.engine import compare_ordered, compare_unordered, diff_lines
from comparepack.diff.exceptions import DiffError, DiffInputError
from comparepack.diff.formatting import render_analysis, render_diff_summary, render_side_by_side
from comparepack.diff.keys import CompareOptions, comparison_key
from comparepack.diff.models import DIFF_MODES, DIFF_TYPES, DiffEntry, DiffMode, DiffResult, DiffType

__all__ = [
    "DIFF_MODES",
    "DIFF_TYPES",
    "DiffMode",
    "DiffType",
    "DiffEntry",
    "DiffResult",
    "DiffError",
    "DiffInputError",
    "CompareOptions",
    "comparison_key",
    "compare_ordered",
    "compare_unordered",
    "diff_lines",
    "AssertionResult",
    "assert_lines",
    "render_diff_summary",
    "render_side_by_side",
    "render_analysis",
]
