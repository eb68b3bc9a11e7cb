from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from table_toolkit.cli import app


DATA = """city,population,density
Shanghai,24256800,3826
Delhi,16787941,11313
Lagos,16060303,13712
"""


def _write(tmp_path: Path, text: str = DATA) -> Path:
    path = tmp_path / "cities.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_show_sorts_numeric_column_descending(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["show", str(_write(tmp_path)), "--numeric", "density", "--sort", "density", "--desc"])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0].startswith("city")
    assert [line.split()[0] for line in lines[1:]] == ["Lagos", "Delhi", "Shanghai"]


def test_show_without_headers(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["show", str(_write(tmp_path)), "--no-headers"])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("Shanghai" + " " * 10)


def test_show_custom_delimiter(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write(tmp_path, "a;b\nx;1\n")
    result = runner.invoke(app, ["show", str(path), "-d", ";"])

    assert result.exit_code == 0, result.output
    assert result.output.splitlines()[1].startswith("x" + " " * 17)


def test_show_pretty(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["show", str(_write(tmp_path)), "--pretty"])

    assert result.exit_code == 0, result.output
    assert "Shanghai" in result.output
    assert "cities.csv" in result.output


def test_show_missing_header_fails(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["show", str(_write(tmp_path)), "--sort", "nope"])

    assert result.exit_code == 1
    assert "header 'nope' not found" in result.output


def test_show_non_numeric_column_fails(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["show", str(_write(tmp_path)), "--numeric", "city"])

    assert result.exit_code == 1
    assert "Not a number" in result.output


def test_show_malformed_input_fails(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["show", str(_write(tmp_path, "a,b\n1,2,3\n"))])

    assert result.exit_code == 1
    assert "expected 2 cells, found 3" in result.output


def test_show_pretty_keeps_bracketed_cells(tmp_path: Path) -> None:
    runner = CliRunner()
    path = _write(tmp_path, "name,tag\nA,[bold]\nB,[/x]\n")
    result = runner.invoke(app, ["show", str(path), "--pretty"])

    assert result.exit_code == 0, result.output
    assert "[bold]" in result.output
    assert "[/x]" in result.output
