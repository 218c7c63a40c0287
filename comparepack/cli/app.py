from contextlib import nullcontext
import json
from importlib.metadata import PackageNotFoundError, version as package_version
from dataclasses import dataclass
from pathlib import Path
import sys
from typing import Any

import typer

from comparepack.config import CompareConfig, CompareConfigError, resolve_compare_config
from comparepack.core import split_lines
from comparepack.diff import (
    AssertionResult,
    DIFF_MODES,
    DiffResult,
    diff_lines,
    render_analysis,
    render_diff_summary,
    render_side_by_side,
)
from comparepack.plugins import DiffTracePlugin, use_plugins
from comparepack.preprocess import preprocess_text

app = typer.Typer(help="TextCompare CLI")

_STDIN_PATH = "-"


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


class _InputError(Exception):
    """Raised when a compare input cannot be read."""


def _resolve_cli_version() -> str:
    try:
        return package_version("textcompare")
    except PackageNotFoundError:
        from textcompare import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show TextCompare version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            indent=2,
        )
    typer.echo(rendered, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _fail(
    command: str,
    error: Exception,
    *,
    json_output: bool,
    expected: Path,
    current: Path,
) -> typer.Exit:
    message = f"{command} failed: {error}"
    if json_output:
        _echo_json(
            {
                "status": "error",
                "exit_code": 1,
                "message": message,
                "expected_path": str(expected),
                "current_path": str(current),
            }
        )
    else:
        _echo(message, err=True)
    return typer.Exit(code=1)


def _normalize_mode(command: str, mode: str | None) -> bool | None:
    if mode is None:
        return None
    normalized = mode.strip().lower()
    if normalized not in DIFF_MODES:
        _echo(
            f"{command} failed: unsupported --mode {mode!r}; "
            f"expected one of: {', '.join(DIFF_MODES)}.",
            err=True,
        )
        raise typer.Exit(code=2)
    return normalized == "ordered"


def _read_input(path: Path, *, stdin_used: list[bool]) -> str:
    if str(path) == _STDIN_PATH:
        if stdin_used[0]:
            raise _InputError("only one input may be read from stdin ('-').")
        stdin_used[0] = True
        return sys.stdin.read()
    try:
        return path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as error:
        raise _InputError(f"input file not found: {path}") from error
    except IsADirectoryError as error:
        raise _InputError(f"input path is a directory: {path}") from error
    except UnicodeDecodeError as error:
        raise _InputError(f"input file is not valid UTF-8: {path}") from error
    except OSError as error:
        raise _InputError(f"input file could not be read: {path} ({error.strerror})") from error


def _load_config(
    config_path: Path | None,
    *,
    ordered: bool | None,
    ignore_case: bool,
    trim: bool,
    remove_append: bool,
    delete_chars: str | None,
    truncate_duplicates: bool,
) -> CompareConfig:
    try:
        base = resolve_compare_config(config_path)
    except FileNotFoundError as error:
        raise CompareConfigError(f"compare config not found: {error.filename}") from error
    except OSError as error:
        raise CompareConfigError(
            f"compare config could not be read: {error.filename} ({error.strerror})"
        ) from error
    # Switch flags only turn settings on; config values stay in effect otherwise.
    return base.with_overrides(
        ordered=ordered,
        ignore_case=ignore_case or None,
        trim=trim or None,
        remove_append=remove_append or None,
        delete_chars=delete_chars,
        truncate_duplicates=truncate_duplicates or None,
    )


def _run_diff(
    expected: Path,
    current: Path,
    config: CompareConfig,
    *,
    trace: Path | None,
) -> DiffResult:
    stdin_used = [False]
    expected_text = _read_input(expected, stdin_used=stdin_used)
    current_text = _read_input(current, stdin_used=stdin_used)
    if config.preprocess.enabled:
        expected_text = preprocess_text(expected_text, config.preprocess)
        current_text = preprocess_text(current_text, config.preprocess)
    expected_lines = split_lines(expected_text)
    current_lines = split_lines(current_text)
    tracing = nullcontext() if trace is None else use_plugins(DiffTracePlugin(output_path=trace))
    with tracing:
        return diff_lines(
            expected_lines,
            current_lines,
            ordered=config.ordered,
            **config.options.to_dict(),
        )


_MODE_OPTION = typer.Option(
    None,
    "--mode",
    "-m",
    help="Comparison mode: ordered (LCS alignment) or unordered (position-free).",
)
_IGNORE_CASE_OPTION = typer.Option(
    False,
    "--ignore-case",
    "-i",
    help="Compare lines case-insensitively.",
)
_TRIM_OPTION = typer.Option(
    False,
    "--trim",
    "-t",
    help="Ignore leading/trailing whitespace when comparing lines.",
)
_REMOVE_APPEND_OPTION = typer.Option(
    False,
    "--remove-append",
    help="Replace '.append(...)' lines by their unquoted argument before comparing.",
)
_DELETE_CHARS_OPTION = typer.Option(
    None,
    "--delete-chars",
    help="Characters removed from both inputs before comparing.",
)
_TRUNCATE_DUPLICATES_OPTION = typer.Option(
    False,
    "--truncate-duplicates",
    help="Keep only the first occurrence of each line before comparing.",
)
_CONFIG_OPTION = typer.Option(
    None,
    "--config",
    help="Path to JSON compare config (defaults to $TEXTCOMPARE_CONFIG).",
)
_TRACE_OPTION = typer.Option(
    None,
    "--trace",
    help="Append diff lifecycle events to this NDJSON file.",
)


@app.command()
def compare(
    expected: Path = typer.Argument(..., help="Expected text file ('-' for stdin)."),
    current: Path = typer.Argument(..., help="Current text file ('-' for stdin)."),
    mode: str | None = _MODE_OPTION,
    ignore_case: bool = _IGNORE_CASE_OPTION,
    trim: bool = _TRIM_OPTION,
    remove_append: bool = _REMOVE_APPEND_OPTION,
    delete_chars: str | None = _DELETE_CHARS_OPTION,
    truncate_duplicates: bool = _TRUNCATE_DUPLICATES_OPTION,
    config_path: Path | None = _CONFIG_OPTION,
    trace: Path | None = _TRACE_OPTION,
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable diff output.",
    ),
    side_by_side: bool = typer.Option(
        True,
        "--side-by-side/--summary-only",
        help="Print the two-column Expected/Current view.",
    ),
    width: int = typer.Option(
        40,
        "--width",
        min=4,
        help="Column width of the side-by-side view.",
    ),
) -> None:
    """Compare two texts line by line."""
    ordered = _normalize_mode("compare", mode)
    try:
        config = _load_config(
            config_path,
            ordered=ordered,
            ignore_case=ignore_case,
            trim=trim,
            remove_append=remove_append,
            delete_chars=delete_chars,
            truncate_duplicates=truncate_duplicates,
        )
        result = _run_diff(expected, current, config, trace=trace)
    except (_InputError, CompareConfigError) as error:
        raise _fail(
            "compare",
            error,
            json_output=json_output,
            expected=expected,
            current=current,
        ) from error

    if json_output:
        _echo_json(
            {
                **result.to_dict(),
                "status": "ok",
                "exit_code": 0,
                "message": "compare completed",
                "config": config.to_dict(),
                "expected_path": str(expected),
                "current_path": str(current),
            }
        )
        return

    _echo(render_diff_summary(result))
    if side_by_side:
        _echo(render_side_by_side(result, width=width))
    _echo(render_analysis(result))


@app.command(name="assert")
def assert_text(
    expected: Path = typer.Argument(..., help="Expected text file ('-' for stdin)."),
    current: Path = typer.Argument(..., help="Current text file ('-' for stdin)."),
    mode: str | None = _MODE_OPTION,
    ignore_case: bool = _IGNORE_CASE_OPTION,
    trim: bool = _TRIM_OPTION,
    remove_append: bool = _REMOVE_APPEND_OPTION,
    delete_chars: str | None = _DELETE_CHARS_OPTION,
    truncate_duplicates: bool = _TRUNCATE_DUPLICATES_OPTION,
    config_path: Path | None = _CONFIG_OPTION,
    trace: Path | None = _TRACE_OPTION,
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable assertion output.",
    ),
) -> None:
    """Assert current text matches expected text (exit 1 on any difference)."""
    ordered = _normalize_mode("assert", mode)
    try:
        config = _load_config(
            config_path,
            ordered=ordered,
            ignore_case=ignore_case,
            trim=trim,
            remove_append=remove_append,
            delete_chars=delete_chars,
            truncate_duplicates=truncate_duplicates,
        )
        result = AssertionResult(diff=_run_diff(expected, current, config, trace=trace))
    except (_InputError, CompareConfigError) as error:
        raise _fail(
            "assert",
            error,
            json_output=json_output,
            expected=expected,
            current=current,
        ) from error

    if json_output:
        payload = result.to_dict()
        payload["expected_path"] = str(expected)
        payload["current_path"] = str(current)
        _echo_json(payload)
    else:
        if result.passed:
            _echo(f"assert passed: expected={expected} current={current}")
        else:
            _echo(
                f"assert failed: texts differ (expected={expected} current={current})",
                force=True,
            )
        _echo(render_diff_summary(result.diff))
        if not result.passed:
            _echo(render_analysis(result.diff))

    if not result.passed:
        raise typer.Exit(code=result.exit_code)


def main() -> None:
    app()
