"""Stable public API surface for TextCompare.

This module is the supported import path for library users.
"""

from __future__ import annotations

from typing import Literal, Sequence

from comparepack.config import CompareConfig, load_compare_config_from_file
from comparepack.core import split_lines
from comparepack.diff import (
    AssertionResult,
    CompareOptions,
    DiffEntry,
    DiffResult,
    assert_lines,
    diff_lines,
)
from comparepack.preprocess import PreprocessOptions, preprocess_text

__version__ = "0.1.0"

CompareMode = Literal["ordered", "unordered"]


def diff(
    expected: Sequence[str],
    current: Sequence[str],
    *,
    mode: CompareMode = "unordered",
    ignore_case: bool = False,
    trim: bool = False,
) -> DiffResult:
    """Diff two line sequences.

    Args:
        expected: Expected lines.
        current: Current lines.
        mode: ``"ordered"`` for LCS alignment, ``"unordered"`` for matching
            lines regardless of position.
        ignore_case: Compare lines case-insensitively.
        trim: Ignore leading/trailing whitespace when comparing.

    Returns:
        Structured line diff result.
    """
    return diff_lines(
        expected,
        current,
        ordered=_is_ordered(mode),
        ignore_case=ignore_case,
        trim=trim,
    )


def diff_text(
    expected_text: str,
    current_text: str,
    *,
    mode: CompareMode = "unordered",
    ignore_case: bool = False,
    trim: bool = False,
    preprocess: PreprocessOptions | None = None,
) -> DiffResult:
    """Split two raw texts into lines, optionally pre-process them, and diff them.

    Args:
        expected_text: Expected raw text.
        current_text: Current raw text.
        mode: ``"ordered"`` or ``"unordered"``.
        ignore_case: Compare lines case-insensitively.
        trim: Ignore leading/trailing whitespace when comparing.
        preprocess: Optional clean-up applied to both texts first.

    Returns:
        Structured line diff result.
    """
    expected, current = _prepare_lines(expected_text, current_text, preprocess)
    return diff(
        expected,
        current,
        mode=mode,
        ignore_case=ignore_case,
        trim=trim,
    )


def assert_text(
    expected_text: str,
    current_text: str,
    *,
    mode: CompareMode = "unordered",
    ignore_case: bool = False,
    trim: bool = False,
    preprocess: PreprocessOptions | None = None,
) -> AssertionResult:
    """Assert two raw texts hold the same lines.

    Takes the same arguments as ``diff_text``.

    Returns:
        Assertion result whose ``passed`` is true when no line is missing or extra.
    """
    expected, current = _prepare_lines(expected_text, current_text, preprocess)
    return assert_lines(
        expected,
        current,
        ordered=_is_ordered(mode),
        ignore_case=ignore_case,
        trim=trim,
    )


def _prepare_lines(
    expected_text: str,
    current_text: str,
    preprocess: PreprocessOptions | None,
) -> tuple[list[str], list[str]]:
    if preprocess is not None:
        expected_text = preprocess_text(expected_text, preprocess)
        current_text = preprocess_text(current_text, preprocess)
    return split_lines(expected_text), split_lines(current_text)


def _is_ordered(mode: str) -> bool:
    if mode not in ("ordered", "unordered"):
        raise ValueError(f"Unsupported compare mode: {mode}. Expected 'ordered' or 'unordered'.")
    return mode == "ordered"


__all__ = [
    "__version__",
    "CompareMode",
    "CompareOptions",
    "CompareConfig",
    "PreprocessOptions",
    "DiffEntry",
    "DiffResult",
    "AssertionResult",
    "load_compare_config_from_file",
    "diff",
    "diff_text",
    "assert_text",
]
