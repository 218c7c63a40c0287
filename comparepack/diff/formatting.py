"""CLI-friendly rendering for line diff results."""

from __future__ import annotations

from comparepack.diff.models import DiffEntry, DiffResult

_MARKERS = {"same": " ", "removed": "-", "added": "+"}
_EMPTY_NOTE = "no differences to show or empty input"


def render_diff_summary(diff: DiffResult) -> str:
    summary = diff.summary()
    return (
        f"mode={diff.mode} same={summary['same']} removed={summary['removed']} "
        f"added={summary['added']} missing={len(diff.missing_lines)} "
        f"extra={len(diff.extra_lines)}"
    )


def render_side_by_side(diff: DiffResult, *, width: int = 40) -> str:
    """Render a two-column Expected/Current view with original line numbers."""
    column = max(4, width)
    number_width = max(3, len(str(max(diff.total_expected_lines, diff.total_current_lines))))

    lines = [
        _row(
            " " * number_width,
            " ",
            "Expected",
            " " * number_width,
            " ",
            "Current",
            column=column,
        )
    ]
    if not diff.entries:
        lines.append(_EMPTY_NOTE)
        return "\n".join(lines)

    for entry in diff.entries:
        marker = _MARKERS[entry.type]
        lines.append(
            _row(
                _line_number(entry.original_index, width=number_width),
                marker if entry.type != "added" else " ",
                _side_text(entry, side="expected"),
                _line_number(entry.current_index, width=number_width),
                marker if entry.type != "removed" else " ",
                _side_text(entry, side="current"),
                column=column,
            )
        )
    return "\n".join(lines)


def render_analysis(diff: DiffResult, *, max_lines: int = 50) -> str:
    """Render missing/extra line lists."""
    lines: list[str] = []
    sections = (
        ("missing in current", diff.missing_lines),
        ("extra in current", diff.extra_lines),
    )
    for title, values in sections:
        lines.append(f"{title} ({len(values)}):")
        if not values:
            lines.append("  none")
            continue
        for value in values[:max_lines]:
            lines.append(f"  {value}")
        if len(values) > max_lines:
            lines.append(f"  ... {len(values) - max_lines} more")
    return "\n".join(lines)


def _side_text(entry: DiffEntry, *, side: str) -> str:
    if side == "expected":
        return entry.expected_text if entry.expected_text is not None else ""
    return entry.current_text if entry.current_text is not None else ""


def _line_number(index: int | None, *, width: int) -> str:
    if index is None:
        return " " * width
    return str(index + 1).rjust(width)


def _clip(text: str, width: int) -> str:
    if len(text) <= width:
        return text.ljust(width)
    return text[: width - 1] + "~"


def _row(
    left_number: str,
    left_marker: str,
    left_text: str,
    right_number: str,
    right_marker: str,
    right_text: str,
    *,
    column: int,
) -> str:
    left = f"{left_number} {left_marker} {_clip(left_text, column)}"
    right = f"{right_number} {right_marker} {_clip(right_text, column)}"
    return f"{left} | {right}".rstrip()
