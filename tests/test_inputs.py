from __future__ import annotations

from pathlib import Path

import pytest

from aoc2022.errors import InputNotFound
from aoc2022.inputs import InputLoader, InputSource, StaticInputLoader


def test_loader_reads_the_first_existing_candidate(tmp_path: Path) -> None:
    (tmp_path / "day_1_input").write_text("first", encoding="utf-8")
    (tmp_path / "day_1.txt").write_text("second", encoding="utf-8")
    (tmp_path / "day02.txt").write_text("padded", encoding="utf-8")
    loader = InputLoader(tmp_path)

    assert loader.load(1) == "first"
    assert loader.load(2) == "padded"
    assert loader.path_for(3) is None


def test_candidates(tmp_path: Path) -> None:
    assert InputLoader(tmp_path).candidates(7) == [
        tmp_path / "day_7_input",
        tmp_path / "day_7.txt",
        tmp_path / "day07.txt",
    ]


def test_custom_patterns(tmp_path: Path) -> None:
    (tmp_path / "7.in").write_text("custom", encoding="utf-8")

    assert InputLoader(tmp_path, patterns=["{day}.in"]).load(7) == "custom"


def test_missing_input(tmp_path: Path) -> None:
    with pytest.raises(InputNotFound) as exc_info:
        InputLoader(tmp_path).load(4)

    assert exc_info.value.day == 4
    assert exc_info.value.tried == tuple(InputLoader(tmp_path).candidates(4))
    assert "No input found for day 4" in str(exc_info.value)


def test_directories_are_not_inputs(tmp_path: Path) -> None:
    (tmp_path / "day_5.txt").mkdir()

    with pytest.raises(InputNotFound):
        InputLoader(tmp_path).load(5)


def test_input_is_read_as_is(tmp_path: Path) -> None:
    text = "  leading spaces\n\ntrailing newline\n"
    (tmp_path / "day_1.txt").write_text(text, encoding="utf-8")

    assert InputLoader(tmp_path).load(1) == text


def test_default_directory() -> None:
    assert InputLoader().directory == Path("inputs")
    assert repr(InputLoader("somewhere")) == "InputLoader('somewhere')"


def test_static_loader() -> None:
    loader = StaticInputLoader({1: "one"})

    assert loader.load(1) == "one"
    with pytest.raises(InputNotFound):
        loader.load(2)


def test_loaders_are_input_sources(tmp_path: Path) -> None:
    assert isinstance(InputLoader(tmp_path), InputSource)
    assert isinstance(StaticInputLoader({}), InputSource)
