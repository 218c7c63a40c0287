"""Line diff engine: LCS-ordered and multiset-unordered comparison."""

from __future__ import annotations

from collections import deque
from typing import Any, Sequence

from comparepack.diff.exceptions import DiffInputError
from comparepack.diff.keys import key_function
from comparepack.diff.models import DiffEntry, DiffMode, DiffResult
from comparepack.plugins import DiffEndEvent, DiffStartEvent, get_active_plugin_manager


def diff_lines(
    expected: Sequence[str],
    current: Sequence[str],
    *,
    ordered: bool = False,
    ignore_case: bool = False,
    trim: bool = False,
) -> DiffResult:
    """Diff two line sequences in ordered (LCS) or unordered (multiset) mode."""
    expected_lines = _validate_lines(expected, name="expected")
    current_lines = _validate_lines(current, name="current")
    mode: DiffMode = "ordered" if ordered else "unordered"

    compare = compare_ordered if ordered else compare_unordered
    plugin_manager = get_active_plugin_manager()
    if plugin_manager is None:
        return compare(expected_lines, current_lines, ignore_case=ignore_case, trim=trim)

    plugin_manager.on_diff_start(
        DiffStartEvent(
            mode=mode,
            ignore_case=ignore_case,
            trim=trim,
            total_expected_lines=len(expected_lines),
            total_current_lines=len(current_lines),
        )
    )

    try:
        result = compare(expected_lines, current_lines, ignore_case=ignore_case, trim=trim)
    except Exception as error:
        plugin_manager.on_diff_end(
            DiffEndEvent(
                mode=mode,
                status="error",
                error_type=error.__class__.__name__,
                error_message=str(error),
            )
        )
        raise

    plugin_manager.on_diff_end(
        DiffEndEvent(
            mode=mode,
            status="ok",
            identical=result.identical,
            summary=result.summary(),
            missing_count=len(result.missing_lines),
            extra_count=len(result.extra_lines),
        )
    )
    return result


def compare_ordered(
    expected: Sequence[str],
    current: Sequence[str],
    *,
    ignore_case: bool = False,
    trim: bool = False,
) -> DiffResult:
    """Align two line sequences along their longest common subsequence.

    When both backtracking moves keep the LCS length, the current-side line is
    emitted as ``added`` first (``dp[i][j-1] >= dp[i-1][j]``), which fixes the
    output for inputs with several equally long alignments.
    """
    expected_lines = _validate_lines(expected, name="expected")
    current_lines = _validate_lines(current, name="current")
    key = key_function(ignore_case=ignore_case, trim=trim)
    expected_keys = [key(line) for line in expected_lines]
    current_keys = [key(line) for line in current_lines]

    n = len(expected_keys)
    m = len(current_keys)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(1, n + 1):
        row = dp[i]
        previous = dp[i - 1]
        expected_key = expected_keys[i - 1]
        for j in range(1, m + 1):
            if expected_key == current_keys[j - 1]:
                row[j] = previous[j - 1] + 1
            else:
                row[j] = max(previous[j], row[j - 1])

    entries: list[DiffEntry] = []
    missing: list[str] = []
    extra: list[str] = []
    i = n
    j = m
    while i > 0 or j > 0:
        if i > 0 and j > 0 and expected_keys[i - 1] == current_keys[j - 1]:
            entries.append(
                DiffEntry.same(
                    expected_text=expected_lines[i - 1],
                    current_text=current_lines[j - 1],
                    original_index=i - 1,
                    current_index=j - 1,
                )
            )
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or dp[i][j - 1] >= dp[i - 1][j]):
            entries.append(DiffEntry.added(current_text=current_lines[j - 1], current_index=j - 1))
            extra.append(current_lines[j - 1])
            j -= 1
        else:
            entries.append(
                DiffEntry.removed(expected_text=expected_lines[i - 1], original_index=i - 1)
            )
            missing.append(expected_lines[i - 1])
            i -= 1

    entries.reverse()
    missing.reverse()
    extra.reverse()
    return DiffResult(
        mode="ordered",
        entries=entries,
        missing_lines=missing,
        extra_lines=extra,
        ignore_case=ignore_case,
        trim=trim,
    )


def compare_unordered(
    expected: Sequence[str],
    current: Sequence[str],
    *,
    ignore_case: bool = False,
    trim: bool = False,
) -> DiffResult:
    """Match lines regardless of position.

    Each expected line consumes the earliest unmatched current line with the
    same key. Unconsumed current lines are reported afterwards in current
    order.
    """
    expected_lines = _validate_lines(expected, name="expected")
    current_lines = _validate_lines(current, name="current")
    key = key_function(ignore_case=ignore_case, trim=trim)

    available: dict[str, deque[int]] = {}
    for index, line in enumerate(current_lines):
        available.setdefault(key(line), deque()).append(index)

    entries: list[DiffEntry] = []
    missing: list[str] = []
    for index, line in enumerate(expected_lines):
        indices = available.get(key(line))
        if indices:
            current_index = indices.popleft()
            entries.append(
                DiffEntry.same(
                    expected_text=line,
                    current_text=current_lines[current_index],
                    original_index=index,
                    current_index=current_index,
                )
            )
        else:
            entries.append(DiffEntry.removed(expected_text=line, original_index=index))
            missing.append(line)

    leftovers = sorted(index for indices in available.values() for index in indices)
    extra: list[str] = []
    for current_index in leftovers:
        line = current_lines[current_index]
        entries.append(DiffEntry.added(current_text=line, current_index=current_index))
        extra.append(line)

    return DiffResult(
        mode="unordered",
        entries=entries,
        missing_lines=missing,
        extra_lines=extra,
        ignore_case=ignore_case,
        trim=trim,
    )


def _validate_lines(lines: Any, *, name: str) -> Sequence[str]:
    if lines is None:
        raise DiffInputError(f"{name} lines are required (got None).")
    if isinstance(lines, (str, bytes, bytearray)):
        raise DiffInputError(
            f"{name} lines must be a sequence of strings, not a single "
            f"{type(lines).__name__}; split the text into lines first."
        )
    try:
        materialized = lines if isinstance(lines, (list, tuple)) else list(lines)
    except TypeError as error:
        raise DiffInputError(
            f"{name} lines must be a sequence of strings (got {type(lines).__name__})."
        ) from error

    for index, line in enumerate(materialized):
        if not isinstance(line, str):
            raise DiffInputError(
                f"{name} line {index} must be a string (got {type(line).__name__})."
            )
    return materialized
