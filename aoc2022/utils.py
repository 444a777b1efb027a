from __future__ import annotations

import time
from datetime import timedelta
from typing import *

from aoc2022.protocols.type_aliases import P, R, SentinelType, T

NoValueT: TypeAlias = SentinelType
NoValue = SentinelType()


class Timed(NamedTuple, Generic[T]):
    """The result of a call together with the wall-clock time it took."""

    result: T
    elapsed: timedelta


def measure(fn: Callable[P, R], *args: P.args, **kwargs: P.kwargs) -> Timed[R]:
    """Call a function, timing it with a monotonic clock.

    Exceptions raised by the function propagate untouched; no timing is produced for a failed
    call.

    Args:
        fn: The function to call.
        *args: Positional arguments for the function.
        **kwargs: Keyword arguments for the function.

    Returns:
        A `Timed` pair with the return value and the elapsed duration.

    Examples:
        >>> timed = measure(sum, [1, 2, 3])
        >>> timed.result
        6
        >>> timed.elapsed >= timedelta(0)
        True
    """
    start = time.perf_counter_ns()
    result = fn(*args, **kwargs)
    elapsed_ns = time.perf_counter_ns() - start
    return Timed(result, timedelta(microseconds=elapsed_ns / 1000))


def milliseconds(delta: timedelta) -> int:
    """Whole milliseconds in a duration, rounded down and never negative.

    Examples:
        >>> milliseconds(timedelta(microseconds=7900))
        7
        >>> milliseconds(timedelta(0))
        0
    """
    return max(0, delta // timedelta(milliseconds=1))


def ensure_iterator(iterable: Iterable[T]) -> Iterator[T]:
    """Given an iterable, return an iterator over it (iterators are returned as they are)."""
    if isinstance(iterable, Iterator):
        return iterable
    return iter(iterable)


__all__ = (
    "NoValue",
    "NoValueT",
    "Timed",
    "measure",
    "milliseconds",
    "ensure_iterator",
)
