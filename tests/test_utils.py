from __future__ import annotations

import time
from datetime import timedelta

import pytest
from hypothesis import given, strategies as st

from aoc2022.utils import NoValue, Timed, ensure_iterator, measure, milliseconds


def test_measure() -> None:
    result = measure(time.sleep, 0.01)

    assert isinstance(result, Timed)
    assert result.result is None
    assert result.elapsed >= timedelta(milliseconds=10)


def test_measure_passes_arguments() -> None:
    assert measure(int, "ff", base=16).result == 255


def test_measure_propagates_exceptions() -> None:
    with pytest.raises(ZeroDivisionError):
        measure(lambda: 1 / 0)


@given(st.integers(min_value=0, max_value=10**9))
def test_milliseconds(microseconds: int) -> None:
    assert milliseconds(timedelta(microseconds=microseconds)) == microseconds // 1000


def test_milliseconds_is_never_negative() -> None:
    assert milliseconds(timedelta(microseconds=-5)) == 0


def test_ensure_iterator() -> None:
    it = iter([1, 2])

    assert ensure_iterator(it) is it
    assert list(ensure_iterator([1, 2])) == [1, 2]


def test_no_value_repr() -> None:
    assert repr(NoValue) == "NoValue"
