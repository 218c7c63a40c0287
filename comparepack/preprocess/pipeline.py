"""Text clean-up applied before comparison."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Any

from comparepack.core.lines import join_lines, split_lines

_APPEND_CALL = re.compile(r"\.append\s*\((.*)\)")
_QUOTES = ('"', "'")


@dataclass(frozen=True, slots=True)
class PreprocessOptions:
    """Pre-processing switches, applied in declaration order."""

    remove_append: bool = False
    delete_chars: str = ""
    truncate_duplicates: bool = False

    @property
    def enabled(self) -> bool:
        return self.remove_append or bool(self.delete_chars) or self.truncate_duplicates

    def to_dict(self) -> dict[str, Any]:
        return {
            "remove_append": self.remove_append,
            "delete_chars": self.delete_chars,
            "truncate_duplicates": self.truncate_duplicates,
        }


DEFAULT_PREPROCESS_OPTIONS = PreprocessOptions()


def preprocess_text(
    text: str,
    options: PreprocessOptions = DEFAULT_PREPROCESS_OPTIONS,
) -> str:
    """Apply ``.append(...)`` unwrapping, character deletion and de-duplication."""
    processed = text
    if options.remove_append:
        processed = join_lines([unwrap_append(line) for line in split_lines(processed)])
    if options.delete_chars:
        processed = delete_characters(processed, options.delete_chars)
    if options.truncate_duplicates:
        processed = join_lines(unique_lines(split_lines(processed)))
    return processed


def unwrap_append(line: str) -> str:
    """Return the argument of a ``.append(...)`` call, unquoted, or the line itself."""
    match = _APPEND_CALL.search(line)
    if match is None or not match.group(1):
        return line
    content = match.group(1).strip()
    if len(content) >= 2 and content[0] in _QUOTES and content[-1] == content[0]:
        content = content[1:-1]
    return content


def delete_characters(text: str, characters: str) -> str:
    return text.translate({ord(char): None for char in characters})


def unique_lines(lines: list[str]) -> list[str]:
    # dict keeps first-seen order
    return list(dict.fromkeys(lines))
