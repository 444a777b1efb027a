from __future__ import annotations

from abc import ABC
from functools import reduce, wraps
from types import NotImplementedType
from typing import *

from .utils import NoValue, NoValueT, ensure_iterator

_T = TypeVar("_T")

_U = TypeVar("_U")

_I = TypeVar("_I", contravariant=True)
_O = TypeVar("_O", covariant=True)
_R = TypeVar("_R")

_P = ParamSpec("_P")

Fn: TypeAlias = Callable[[_I], _O]


class Transformer(Generic[_I, _O], ABC):
    """A reusable step of a pipeline, turning an iterable of `_I` into an iterator of `_O`."""

    def transform(self, src: Iterable[_I]) -> Iterator[_O]:
        raise NotImplementedError

    ####################################################################
    # __truediv__ (a.k.a. `/`) overloads
    # Apply Transformer
    # - Transformer     /  Transformer     -> TransformerPipeline
    # - Transformer     /  Callable        -> Transformer @ Map(Callable)     -> TransformerPipeline
    # - Callable        /  Transformer     -> Map(Callable) @ Transformer     -> TransformerPipeline
    # - Iterable        /  Transformer     -> Stream @ Transformer            -> Stream

    @overload
    def __truediv__(self, other: Transformer[_O, _R]) -> TransformerPipeline[_I, _R]:
        ...

    @overload
    def __truediv__(self, other: Fn[_O, _R]) -> TransformerPipeline[_I, _R]:
        ...

    @overload
    def __truediv__(self, other: object) -> TransformerPipeline[_I, _R] | NotImplementedType:
        ...

    def __truediv__(
        self,
        other: Transformer[_O, _R] | Fn[_O, _R] | object,
    ) -> TransformerPipeline[_I, _R] | NotImplementedType:

        # Transformer / Transformer -> TransformerPipeline
        if isinstance(other, Transformer):
            return TransformerPipeline(self, other)

        # Transformer / Callable -> Transformer / Map(Callable) -> TransformerPipeline
        if callable(other):
            return TransformerPipeline(self, Map(other))

        return NotImplemented

    @overload
    def __rtruediv__(self, other: Iterable[_I]) -> Stream[_O]:
        ...

    @overload
    def __rtruediv__(self, other: Fn[_T, _I]) -> TransformerPipeline[_T, _O]:
        ...

    @overload
    def __rtruediv__(self, other: object) -> Stream[_O] | TransformerPipeline[_T, _O] | NotImplementedType:
        ...

    def __rtruediv__(
        self,
        other: Iterable[_I] | Fn[_T, _I] | object,
    ) -> Stream[_O] | TransformerPipeline[_T, _O] | NotImplementedType:

        # Iterable / Transformer -> Stream @ Transformer -> Stream
        if isinstance(other, Iterable):
            return Stream(other).transform(self)

        # Callable / Transformer -> Map(Callable) @ Transformer -> TransformerPipeline
        if callable(other):
            return TransformerPipeline(Map(other), self)

        return NotImplemented

    ####################################################################
    # __floordiv__ (a.k.a. `//`) overloads
    # Flat map
    # - Transformer     //  Callable        -> Transformer @ FlatMap(Callable) -> TransformerPipeline

    def __floordiv__(
        self,
        other: Fn[_O, Iterable[_R]] | object,
    ) -> TransformerPipeline[_I, _R] | NotImplementedType:
        if callable(other):
            return TransformerPipeline(self, FlatMap(other))
        return NotImplemented

    ####################################################################
    # __mod__ (a.k.a. `%`) overloads
    # Filter
    # - Transformer     %  Callable        -> Transformer @ Filter(Callable)  -> TransformerPipeline
    # - Callable        %  Transformer     -> Filter(Callable) @ Transformer  -> TransformerPipeline

    def __mod__(self, other: Fn[_O, bool] | object) -> TransformerPipeline[_I, _O] | NotImplementedType:
        if callable(other):
            return TransformerPipeline(self, Filter(other))
        return NotImplemented

    def __rmod__(self, other: Fn[_I, bool] | object) -> TransformerPipeline[_I, _O] | NotImplementedType:
        if callable(other):
            return TransformerPipeline(Filter(other), self)
        return NotImplemented


class Stream(Iterator[_T]):
    """A lazily evaluated iterator supporting pipeline operators.

    - `stream / fn` maps, `stream / transformer` applies a transformer
    - `stream // fn` flat-maps
    - `stream % predicate` filters
    - `+stream` flattens a stream of iterables

    Examples:
        >>> list(Stream(range(6)) % (lambda n: n % 2 == 0) / (lambda n: n * 10))
        [0, 20, 40]
        >>> list(+Stream([[1, 2], [3]]))
        [1, 2, 3]
    """

    def __init__(self, src: Iterable[_T]) -> None:
        self._src = ensure_iterator(src)

    def __iter__(self) -> Iterator[_T]:
        return self

    def __next__(self) -> _T:
        return next(self._src)

    def transform(self, transformer: Transformer[_T, _R]) -> Stream[_R]:
        cls_ = cast(Type[Stream[_R]], type(self))
        return cls_(transformer.transform(self))

    @overload
    def __truediv__(self, other: Transformer[_T, _R]) -> Stream[_R]:
        ...

    @overload
    def __truediv__(self, other: Fn[_T, _R]) -> Stream[_R]:
        ...

    @overload
    def __truediv__(self, other: object) -> Stream[_R] | NotImplementedType:
        ...

    def __truediv__(self, other: Transformer[_T, _R] | Fn[_T, _R] | object) -> Stream[_R] | NotImplementedType:
        """Map the stream using the given function or transformer."""

        # Stream / Transformer -> Stream @ Transformer -> Stream
        if isinstance(other, Transformer):
            return self.transform(other)

        # Stream / Callable -> Map(Callable) @ Stream -> Stream
        if callable(other):
            return self.transform(Map(other))

        return NotImplemented

    def __floordiv__(self, other: Fn[_T, Iterable[_R]]) -> Stream[_R]:
        """Flatten the stream using the given function."""
        return self.transform(FlatMap(other))

    def __mod__(self, other: Fn[_T, bool] | object) -> Stream[_T] | NotImplementedType:
        """Filter the stream using the given function as predicate."""
        # Stream % Callable -> Stream @ Filter(Callable) -> Stream
        if callable(other):
            return self.transform(Filter(other))
        return NotImplemented

    def __pos__(self: Stream[Iterable[_U]]) -> Stream[_U]:
        """Flatten the stream."""
        return self.transform(FlatMap(lambda x: x))

    def reduce(self, fn: Callable[[_R, _T], _R], initial: _R | NoValueT = NoValue) -> _R:
        """Consume the stream, folding it into a single value.

        Raises:
            ValueError: If the stream is empty and no initial value is given.
        """
        if isinstance(initial, NoValueT):
            try:
                initial = cast(_R, next(self))
            except StopIteration:
                raise ValueError("reduce() of an empty stream with no initial value") from None
        return reduce(fn, self, initial)

    def last(self) -> _T:
        """Consume the stream and return its last item.

        Raises:
            ValueError: If the stream is empty.
        """
        item: _T | NoValueT = NoValue
        for item in self:
            pass
        if isinstance(item, NoValueT):
            raise ValueError("last() of an empty stream")
        return item

    def to_list(self) -> list[_T]:
        return list(self)


class Map(Transformer[_I, _O]):
    def __init__(self, fn: Fn[_I, _O]) -> None:
        self._fn = fn

    def transform(self, src: Iterable[_I]) -> Iterator[_O]:
        for item in src:
            yield self._fn(item)


class FlatMap(Transformer[_I, _O]):
    def __init__(self, fn: Fn[_I, Iterable[_O]]) -> None:
        self._fn = fn

    def transform(self, src: Iterable[_I]) -> Iterator[_O]:
        for item in src:
            yield from self._fn(item)


class Filter(Transformer[_T, _T]):
    def __init__(self, fn: Fn[_T, bool]) -> None:
        self._fn = fn

    def transform(self, src: Iterable[_T]) -> Iterator[_T]:
        for item in src:
            if self._fn(item):
                yield item


class TransformerPipeline(Transformer[_I, _O]):
    def __init__(self, t_a: Transformer[_I, _U], t_b: Transformer[_U, _O]) -> None:
        self._t_a = t_a
        self._t_b = t_b

    def transform(self, src: Iterable[_I]) -> Iterator[_O]:
        return self._t_b.transform(self._t_a.transform(src))


class FnTransformer(Transformer[_I, _O]):
    def __init__(self, fn: Callable[[Iterator[_I]], Iterator[_O]]) -> None:
        self._fn = fn

    def transform(self, src: Iterable[_I]) -> Iterator[_O]:
        yield from self._fn(ensure_iterator(src))


def transformer(
    _fn: Callable[Concatenate[Iterator[_I], _P], Iterator[_O]]
) -> Callable[_P, FnTransformer[_I, _O]]:
    """Turn a generator function taking an iterator as first argument into a transformer factory.

    The remaining arguments of the function become the arguments of the factory.

    Examples:
        >>> @transformer
        ... def add(src, n):
        ...     for item in src:
        ...         yield item + n
        >>> list(Stream(range(3)) / add(10))
        [10, 11, 12]
    """

    @wraps(_fn)
    def _outer(*__args: _P.args, **__kwargs: _P.kwargs) -> FnTransformer[_I, _O]:
        def _inner(_src: Iterator[_I]) -> Iterator[_O]:
            return _fn(_src, *__args, **__kwargs)

        return FnTransformer(_inner)

    return _outer


def stream(__fn: Callable[_P, Iterable[_O]]) -> Callable[_P, Stream[_O]]:
    """Make a function returning an iterable return a `Stream` instead."""

    @wraps(__fn)
    def _outer(*__args: _P.args, **__kwargs: _P.kwargs) -> Stream[_O]:
        return Stream(__fn(*__args, **__kwargs))

    return _outer


__all__ = [
    "Stream",
    "Transformer",
    "Map",
    "FlatMap",
    "Filter",
    "TransformerPipeline",
    "FnTransformer",
    "transformer",
    "stream",
]
