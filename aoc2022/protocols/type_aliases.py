from __future__ import annotations

from typing import (
    Callable,
    NamedTuple,
    ParamSpec,
    Protocol,
    TypeAlias,
    TypeVar,
    Union,
)

T = TypeVar("T")
R = TypeVar("R")

P = ParamSpec("P")

Day: TypeAlias = int
Part: TypeAlias = int
AnswerValue: TypeAlias = Union[int, str]


class Answer(NamedTuple):
    """A labelled answer to one part of a puzzle."""

    label: str
    value: AnswerValue


class PartSolver(Protocol):
    def __call__(self, __puzzle_input: str) -> tuple[str, AnswerValue]:
        ...


class ChainedPartSolver(Protocol):
    def __call__(self, __puzzle_input: str, __previous: AnswerValue) -> tuple[str, AnswerValue]:
        ...


SomePartSolver: TypeAlias = Union[PartSolver, ChainedPartSolver, Callable[..., tuple[str, AnswerValue]]]


class SentinelType:
    def __repr__(self) -> str:
        return "NoValue"
