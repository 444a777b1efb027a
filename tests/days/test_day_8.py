from __future__ import annotations

from typing import Callable

import pytest

from aoc2022.days.day_8 import Trees


@pytest.fixture
def trees(puzzle_example: Callable[..., str]) -> Trees:
    return Trees.parse(puzzle_example(8))


def test_edges_are_visible(trees: Trees) -> None:
    visible = trees.visible_trees()

    assert all((0, column) in visible for column in range(trees.columns))
    assert all((row, 0) in visible for row in range(trees.rows))
    assert len(visible) == 21


@pytest.mark.parametrize(
    ("position", "visible"),
    (((1, 1), True), ((1, 3), False), ((2, 2), False), ((3, 2), True)),
)
def test_is_visible(trees: Trees, position: tuple[int, int], visible: bool) -> None:
    assert trees.is_visible(*position) is visible


@pytest.mark.parametrize(("position", "score"), (((1, 2), 4), ((3, 2), 8), ((0, 0), 0)))
def test_scenic_score(trees: Trees, position: tuple[int, int], score: int) -> None:
    assert trees.scenic_score(*position) == score


def test_invalid_grid() -> None:
    with pytest.raises(ValueError):
        Trees.parse("123\n45\n")
    with pytest.raises(ValueError):
        Trees.parse("12x\n456\n")
