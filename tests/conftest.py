from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterator

import pytest
from _pytest.logging import LogCaptureFixture
from loguru import logger

from aoc2022.inputs import InputLoader, StaticInputLoader
from aoc2022.protocols.type_aliases import Answer
from aoc2022.registry import RegistryBuilder, SolverRegistry

INPUTS_DIR = Path(__file__).parent / "inputs"


@pytest.fixture
def inputs_dir() -> Path:
    """Directory holding the example inputs from the puzzle statements."""
    return INPUTS_DIR


@pytest.fixture
def example_loader(inputs_dir: Path) -> InputLoader:
    return InputLoader(inputs_dir)


@pytest.fixture
def puzzle_example(inputs_dir: Path) -> Callable[..., str]:
    """Read an example input, e.g. `puzzle_example(9)` or `puzzle_example(9, "large")`."""

    def _read(day: int, variant: str | None = None) -> str:
        name = f"day_{day}.txt" if variant is None else f"day_{day}_{variant}.txt"
        return (inputs_dir / name).read_text(encoding="utf-8")

    return _read


def count_lines(text: str) -> Answer:
    return Answer("Number of lines", len(text.splitlines()))


def count_words(text: str) -> Answer:
    return Answer("Number of words", len(text.split()))


@pytest.fixture
def toy_registry() -> SolverRegistry:
    return RegistryBuilder().register(1, count_lines, count_words).build()


@pytest.fixture
def toy_loader() -> StaticInputLoader:
    return StaticInputLoader({1: "a b\nc\n"})


@pytest.fixture
def caplog(caplog: LogCaptureFixture) -> Iterator[LogCaptureFixture]:
    """Route loguru records to pytest's caplog."""
    handler_id = logger.add(caplog.handler, format="{message}", level="DEBUG")
    yield caplog
    logger.remove(handler_id)


@pytest.fixture
def restore_logger() -> Iterator[None]:
    """Reinstall loguru's default stderr handler after a test reconfigured it."""
    yield
    logger.remove()
    logger.add(sys.stderr)
