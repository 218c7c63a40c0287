"""Persisted comparison settings loaded from JSON."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import json
import os
from pathlib import Path
from typing import Any, Mapping

from comparepack.diff.keys import CompareOptions
from comparepack.preprocess import PreprocessOptions

COMPARE_CONFIG_ENV_VAR = "TEXTCOMPARE_CONFIG"

_BOOL_KEYS = ("ordered", "ignore_case", "trim", "remove_append", "truncate_duplicates")
_STRING_KEYS = ("delete_chars",)
_SUPPORTED_KEYS = frozenset(_BOOL_KEYS + _STRING_KEYS)


class CompareConfigError(ValueError):
    """Raised when a compare config payload is invalid."""


@dataclass(frozen=True, slots=True)
class CompareConfig:
    """Comparison mode, key normalization and pre-processing settings."""

    ordered: bool = False
    ignore_case: bool = False
    trim: bool = False
    preprocess: PreprocessOptions = field(default_factory=PreprocessOptions)

    @property
    def options(self) -> CompareOptions:
        return CompareOptions(ignore_case=self.ignore_case, trim=self.trim)

    def with_overrides(self, **overrides: Any) -> CompareConfig:
        """Return a copy with every non-``None`` override applied."""
        unknown = sorted(set(overrides) - _SUPPORTED_KEYS)
        if unknown:
            raise CompareConfigError("Unsupported compare config keys: " + ", ".join(unknown))

        top_level: dict[str, Any] = {}
        preprocess: dict[str, Any] = {}
        for key, value in overrides.items():
            if value is None:
                continue
            if key in ("ordered", "ignore_case", "trim"):
                top_level[key] = value
            else:
                preprocess[key] = value
        if preprocess:
            top_level["preprocess"] = replace(self.preprocess, **preprocess)
        return replace(self, **top_level)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ordered": self.ordered,
            "ignore_case": self.ignore_case,
            "trim": self.trim,
            **self.preprocess.to_dict(),
        }


DEFAULT_COMPARE_CONFIG = CompareConfig()


def compare_config_from_mapping(
    config: Mapping[str, Any],
    *,
    base_config: CompareConfig = DEFAULT_COMPARE_CONFIG,
) -> CompareConfig:
    """Create a compare config from a mapping, on top of ``base_config``."""
    unknown = sorted(set(config.keys()) - _SUPPORTED_KEYS)
    if unknown:
        raise CompareConfigError("Unsupported compare config keys: " + ", ".join(unknown))

    values: dict[str, Any] = {}
    for key in _BOOL_KEYS:
        if key not in config:
            continue
        if not isinstance(config[key], bool):
            raise CompareConfigError(f"compare config key '{key}' must be a boolean.")
        values[key] = config[key]
    for key in _STRING_KEYS:
        if key not in config:
            continue
        if not isinstance(config[key], str):
            raise CompareConfigError(f"compare config key '{key}' must be a string.")
        values[key] = config[key]

    return base_config.with_overrides(**values)


def load_compare_config_from_file(
    path: str | Path,
    *,
    base_config: CompareConfig = DEFAULT_COMPARE_CONFIG,
) -> CompareConfig:
    """Load compare config from a JSON file."""
    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8-sig"))
    except FileNotFoundError:
        raise
    except UnicodeDecodeError as error:
        raise CompareConfigError(f"Compare config is not valid UTF-8 ({config_path}).") from error
    except json.JSONDecodeError as error:
        raise CompareConfigError(f"Invalid compare config JSON ({config_path}): {error}") from error

    if not isinstance(raw, dict):
        raise CompareConfigError(f"Compare config must be a JSON object ({config_path}).")

    return compare_config_from_mapping(raw, base_config=base_config)


def resolve_compare_config(path: str | Path | None = None) -> CompareConfig:
    """Load the explicit config path, else ``$TEXTCOMPARE_CONFIG``, else defaults."""
    if path is None:
        env_path = os.getenv(COMPARE_CONFIG_ENV_VAR, "").strip()
        if not env_path:
            return DEFAULT_COMPARE_CONFIG
        path = env_path
    return load_compare_config_from_file(path)
