import json
from pathlib import Path

from typer.testing import CliRunner

from comparepack.cli.app import app


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_cli_assert_passes_for_matching_texts(tmp_path: Path) -> None:
    expected = _write(tmp_path / "expected.txt", "a\nb\n")
    current = _write(tmp_path / "current.txt", "b\na\n")

    runner = CliRunner()
    result = runner.invoke(app, ["assert", str(expected), str(current)])

    assert result.exit_code == 0
    assert "assert passed" in result.stdout
    assert "mode=unordered same=3" in result.stdout


def test_cli_assert_fails_on_ordered_divergence(tmp_path: Path) -> None:
    expected = _write(tmp_path / "expected.txt", "a\nb\n")
    current = _write(tmp_path / "current.txt", "b\na\n")

    runner = CliRunner()
    result = runner.invoke(app, ["assert", str(expected), str(current), "--mode", "ordered"])

    assert result.exit_code == 1
    assert "assert failed: texts differ" in result.stdout
    assert "missing in current (1):" in result.stdout


def test_cli_assert_json_output(tmp_path: Path) -> None:
    expected = _write(tmp_path / "expected.txt", "id\nname")
    current = _write(tmp_path / "current.txt", "ID\nemail")

    runner = CliRunner()
    result = runner.invoke(
        app,
        ["assert", str(expected), str(current), "--ignore-case", "--json"],
    )

    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert payload["status"] == "fail"
    assert payload["exit_code"] == 1
    assert payload["missing_lines"] == ["name"]
    assert payload["extra_lines"] == ["email"]
    assert payload["expected_path"] == str(expected)


def test_cli_assert_quiet_still_reports_failure(tmp_path: Path) -> None:
    expected = _write(tmp_path / "expected.txt", "a")
    current = _write(tmp_path / "current.txt", "b")

    runner = CliRunner()
    result = runner.invoke(app, ["--quiet", "assert", str(expected), str(current)])

    assert result.exit_code == 1
    assert result.stdout.strip().startswith("assert failed: texts differ")
    assert "mode=" not in result.stdout


def test_cli_assert_missing_candidate_file(tmp_path: Path) -> None:
    expected = _write(tmp_path / "expected.txt", "a")

    runner = CliRunner()
    result = runner.invoke(
        app,
        ["assert", str(expected), str(tmp_path / "missing.txt"), "--json"],
    )

    assert result.exit_code == 1
    payload = json.loads(result.stdout)
    assert payload["status"] == "error"
    assert "assert failed: input file not found" in payload["message"]


def test_cli_assert_passes_for_byte_order_mark_file(tmp_path: Path) -> None:
    expected = tmp_path / "expected.sql"
    expected.write_bytes(b"\xef\xbb\xbfSELECT\n  id\nFROM users\n")
    current = _write(tmp_path / "current.sql", "SELECT\n  id\nFROM users\n")

    runner = CliRunner()
    result = runner.invoke(app, ["assert", str(expected), str(current), "--mode", "ordered"])

    assert result.exit_code == 0
    assert "assert passed" in result.stdout


def test_cli_assert_config_directory_fails_cleanly(tmp_path: Path) -> None:
    expected = _write(tmp_path / "expected.txt", "a\n")
    current = _write(tmp_path / "current.txt", "a\n")

    runner = CliRunner()
    result = runner.invoke(
        app,
        ["assert", str(expected), str(current), "--config", str(tmp_path)],
    )

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "assert failed: compare config could not be read" in result.output
