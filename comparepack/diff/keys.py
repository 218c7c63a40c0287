"""Comparison-key normalization shared by ordered and unordered diffs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

# Whitespace and line terminators removed by `trim`: tab, VT, FF, CR, LF, the
# Unicode space separators, U+2028, U+2029 and the byte order mark. C0 file
# separators (\x1c-\x1f) and NEL (\x85) are kept.
TRIM_CHARACTERS = (
    "\t\n\x0b\x0c\r "
    "\u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u202f\u205f\u3000"
    "\u2028\u2029\ufeff"
)


@dataclass(frozen=True, slots=True)
class CompareOptions:
    """Normalization applied to comparison keys only, never to display text."""

    ignore_case: bool = False
    trim: bool = False

    def key(self, line: str) -> str:
        return comparison_key(line, ignore_case=self.ignore_case, trim=self.trim)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ignore_case": self.ignore_case,
            "trim": self.trim,
        }


def comparison_key(line: str, *, ignore_case: bool = False, trim: bool = False) -> str:
    """Derive the comparison key for a line (trim first, then lower-case)."""
    key = line
    if trim:
        key = key.strip(TRIM_CHARACTERS)
    if ignore_case:
        key = key.lower()
    return key


def key_function(*, ignore_case: bool = False, trim: bool = False) -> Callable[[str], str]:
    if not ignore_case and not trim:
        return _identity
    return CompareOptions(ignore_case=ignore_case, trim=trim).key


def _identity(line: str) -> str:
    return line
