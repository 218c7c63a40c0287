"""Raw text to line-sequence splitting."""

from __future__ import annotations

import re

_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """Split text on ``\\r\\n`` or ``\\n`` without dropping any line.

    Blank lines are kept as empty strings, so a trailing newline yields a
    final empty line and the empty text yields a single empty line.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a string (got {type(text).__name__}).")
    return _LINE_BREAK.split(text)


def count_lines(text: str) -> int:
    return len(split_lines(text))


def join_lines(lines: list[str]) -> str:
    return "\n".join(lines)
