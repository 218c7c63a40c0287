"""Pre-processing steps for pasted text."""

from comparepack.preprocess.pipeline import (
    DEFAULT_PREPROCESS_OPTIONS,
    PreprocessOptions,
    delete_characters,
    preprocess_text,
    unique_lines,
    unwrap_append,
)

__all__ = [
    "DEFAULT_PREPROCESS_OPTIONS",
    "PreprocessOptions",
    "preprocess_text",
    "unwrap_append",
    "delete_characters",
    "unique_lines",
]
