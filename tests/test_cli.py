from __future__ import annotations

import re
from pathlib import Path

import pytest
from typer.testing import CliRunner

from aoc2022.cli import app

runner = CliRunner()

pytestmark = pytest.mark.usefixtures("restore_logger")


def test_solve_day(inputs_dir: Path) -> None:
    result = runner.invoke(app, ["1", "--inputs", str(inputs_dir)])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[:2] == [
        "1:1 — Maximum calories held by one Elf: 24000",
        "1:2 — Sum of top three calories held by Elves: 45000",
    ]
    assert re.fullmatch(r"Done in \d+ms", lines[2])
    assert len(lines) == 3


def test_multiline_answer(inputs_dir: Path) -> None:
    result = runner.invoke(app, ["10", "-i", str(inputs_dir)])

    assert result.exit_code == 0
    assert "##..##..##..##..##..##..##..##..##..##.." in result.stdout.splitlines()


def test_unknown_day(inputs_dir: Path) -> None:
    result = runner.invoke(app, ["20", "--inputs", str(inputs_dir)])

    assert result.exit_code == 3
    assert result.stdout == ""
    assert "No solution registered for day 20" in result.output
    assert "20:1" not in result.output


def test_missing_input(tmp_path: Path) -> None:
    result = runner.invoke(app, ["1", "--inputs", str(tmp_path)])

    assert result.exit_code == 4
    assert result.stdout == ""
    assert "No input found for day 1" in result.output


def test_solver_error(tmp_path: Path) -> None:
    (tmp_path / "day_1.txt").write_text("1000\nlots\n", encoding="utf-8")

    result = runner.invoke(app, ["1", "--inputs", str(tmp_path)])

    assert result.exit_code == 5
    assert result.stdout == ""
    assert "Day 1 part 1 failed: ValueError" in result.output
    assert "1:1 —" not in result.output


@pytest.mark.parametrize("day", ("0", "26", "one"))
def test_invalid_day(day: str) -> None:
    result = runner.invoke(app, [day])

    assert result.exit_code == 2


def test_verbose_logs_to_stderr(inputs_dir: Path) -> None:
    result = runner.invoke(app, ["2", "--inputs", str(inputs_dir), "--verbose"])

    assert result.exit_code == 0
    assert "Reading input for day 2" in result.output


def test_quiet_by_default(inputs_dir: Path) -> None:
    result = runner.invoke(app, ["2", "--inputs", str(inputs_dir)])

    assert result.exit_code == 0
    assert "Reading input" not in result.output
