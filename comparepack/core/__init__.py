"""Core text primitives for comparepack."""

from comparepack.core.lines import count_lines, join_lines, split_lines

__all__ = [
    "count_lines",
    "join_lines",
    "split_lines",
]
