from __future__ import annotations

import heapq
from collections import deque
from functools import partial
from itertools import islice
from typing import (
    Any,
    Callable,
    Iterator,
    Literal,
    TypeVar,
    cast,
    overload,
)

from .stream import FnTransformer, Transformer, transformer
from .utils import NoValue, NoValueT

_T = TypeVar("_T")
_U = TypeVar("_U")


@transformer
def partition_by_element(iterator: Iterator[_T], separator: _T) -> Iterator[list[_T]]:
    """Split a stream into groups delimited by `separator`.

    Consecutive separators never produce empty groups, and neither do leading or trailing ones.

    Examples:
        >>> from aoc2022.stream import Stream
        >>> list(Stream(["1", "2", "", "", "3", ""]) / partition_by_element(""))
        [['1', '2'], ['3']]
    """
    group: list[_T] = []
    for item in iterator:
        if item == separator:
            if group:
                yield group
                group = []
        else:
            group.append(item)
    if group:
        yield group


@transformer
def top_k(iterator: Iterator[_T], k: int) -> Iterator[tuple[_T, ...]]:
    """Yield the `k` largest items seen so far, in descending order, after each item.

    The last item of the resulting stream holds the top `k` of the whole stream.

    Examples:
        >>> from aoc2022.stream import Stream
        >>> Stream([5, 1, 9, 3, 7]).transform(top_k(3)).last()
        (9, 7, 5)
    """
    heap: list[Any] = []
    for item in iterator:
        if len(heap) < k:
            heapq.heappush(heap, item)
        elif item > heap[0]:
            heapq.heapreplace(heap, item)
        yield tuple(sorted(heap, reverse=True))


def _nwise(iterator: Iterator[_T], n: int) -> Iterator[tuple[_T, ...]]:
    # Separate implementation from nwise() because the @transformer decorator
    # doesn't work well with @overload
    d = deque[_T](maxlen=n)
    for item in iterator:
        d.append(item)
        if len(d) == n:
            yield tuple(d)


@overload
def nwise(n: Literal[2]) -> Transformer[_T, tuple[_T, _T]]:
    ...


@overload
def nwise(n: Literal[3]) -> Transformer[_T, tuple[_T, _T, _T]]:
    ...


@overload
def nwise(n: int) -> Transformer[_T, tuple[_T, ...]]:
    ...


def nwise(n: int) -> Transformer[_T, tuple[_T, ...]]:
    """Transform an iterable into an iterable of overlapping n-tuples.

    Args:
        n: The size of the tuples to create.

    Returns:
        A transformer that yields sliding windows of `n` items.

    Examples:
        >>> from aoc2022.stream import Stream
        >>> list(Stream(range(4)).transform(nwise(2)))
        [(0, 1), (1, 2), (2, 3)]
    """
    return FnTransformer(partial(_nwise, n=n))


@transformer
def chunked(iterator: Iterator[_T], n: int, strict: bool = False) -> Iterator[tuple[_T, ...]]:
    """Split a stream into consecutive, non-overlapping tuples of `n` items.

    Args:
        n: The size of each chunk.
        strict: Whether an incomplete trailing chunk is an error instead of being dropped.

    Raises:
        ValueError: If `strict` is set and the stream length isn't a multiple of `n`.

    Examples:
        >>> from aoc2022.stream import Stream
        >>> list(Stream(range(7)) / chunked(3))
        [(0, 1, 2), (3, 4, 5)]
    """
    while chunk := tuple(islice(iterator, n)):
        if len(chunk) < n:
            if strict:
                raise ValueError(f"Incomplete chunk of {len(chunk)} items (expected {n})")
            return
        yield chunk


@transformer
def scan(
    iterator: Iterator[_U],
    fn: Callable[[_T, _U], _T],
    initial: _T | NoValueT = NoValue,
) -> Iterator[_T]:
    """Yield the running accumulation of `fn` over the stream, starting with the initial value.

    Examples:
        >>> from aoc2022.stream import Stream
        >>> list(Stream(range(5)) / scan(lambda a, b: a + b))
        [0, 1, 3, 6, 10]
        >>> list(Stream([1, 2]) / scan(lambda a, b: a * b, 10))
        [10, 10, 20]
    """
    if isinstance(initial, NoValueT):
        try:
            initial = cast(_T, next(iterator))
        except StopIteration:
            return
    crt = cast(_T, initial)

    yield crt

    for item in iterator:
        crt = fn(crt, item)
        yield crt


@transformer
def take(iterator: Iterator[_T], n: int) -> Iterator[_T]:
    """Take the first `n` items from the stream.

    Examples:
        >>> from aoc2022.stream import Stream
        >>> list(Stream(range(3)) / take(2))
        [0, 1]
    """
    yield from islice(iterator, n)


@transformer
def drop(iterator: Iterator[_T], n: int) -> Iterator[_T]:
    """Drop the first `n` items from the stream.

    Examples:
        >>> from aoc2022.stream import Stream
        >>> list(Stream(range(3)) / drop(2))
        [2]
    """
    yield from islice(iterator, n, None)


__all__ = (
    "chunked",
    "drop",
    "nwise",
    "partition_by_element",
    "scan",
    "take",
    "top_k",
)
