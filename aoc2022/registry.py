from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from loguru import logger

from aoc2022.errors import DuplicateDay, InvalidDay, UnknownDay
from aoc2022.protocols.type_aliases import Day, PartSolver, SomePartSolver

FIRST_DAY = 1
LAST_DAY = 25


def validate_day(day: object) -> Day:
    """Check that `day` names an Advent day.

    Raises:
        InvalidDay: If `day` isn't an integer between 1 and 25.
    """
    if isinstance(day, bool) or not isinstance(day, int) or not FIRST_DAY <= day <= LAST_DAY:
        raise InvalidDay(day)
    return day


@dataclass(frozen=True)
class SolverEntry:
    """The solvers registered for one day.

    When `part_2_uses_part_1` is set, part 2 is called with the raw input and the value computed
    by part 1; otherwise both parts only get the raw input.
    """

    day: Day
    part_1: PartSolver
    part_2: SomePartSolver | None = None
    part_2_uses_part_1: bool = False

    def __post_init__(self) -> None:
        validate_day(self.day)
        if self.part_2_uses_part_1 and self.part_2 is None:
            raise ValueError(f"Day {self.day} chains part 2 on part 1 but has no part 2")

    @property
    def parts(self) -> int:
        return 1 if self.part_2 is None else 2


class SolverRegistry(Mapping[Day, SolverEntry]):
    """A read-only table of solvers, keyed by day."""

    def __init__(self, entries: Mapping[Day, SolverEntry]) -> None:
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_entries(cls, entries: Iterable[SolverEntry]) -> SolverRegistry:
        builder = RegistryBuilder()
        for entry in entries:
            builder.add(entry)
        return builder.build()

    def lookup(self, day: Day) -> SolverEntry:
        """Return the entry registered for `day`.

        Raises:
            UnknownDay: If nothing is registered for `day`.
        """
        try:
            return self._entries[day]
        except KeyError:
            raise UnknownDay(day) from None

    @property
    def days(self) -> tuple[Day, ...]:
        return tuple(sorted(self._entries))

    def __getitem__(self, day: Day) -> SolverEntry:
        return self._entries[day]

    def __iter__(self) -> Iterator[Day]:
        return iter(self.days)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(days={list(self.days)})"


class RegistryBuilder:
    """Collects solver registrations, then freezes them into a `SolverRegistry`.

    Examples:
        >>> registry = (
        ...     RegistryBuilder()
        ...     .register(1, lambda text: ("Lines", len(text.splitlines())))
        ...     .build()
        ... )
        >>> registry.lookup(1).parts
        1
    """

    def __init__(self) -> None:
        self._entries: dict[Day, SolverEntry] = {}

    def register(
        self,
        day: Day,
        part_1: PartSolver,
        part_2: SomePartSolver | None = None,
        *,
        part_2_uses_part_1: bool = False,
    ) -> RegistryBuilder:
        """Register the solvers of a day.

        Raises:
            InvalidDay: If `day` isn't between 1 and 25.
            DuplicateDay: If `day` already has solvers.
        """
        return self.add(SolverEntry(day, part_1, part_2, part_2_uses_part_1))

    def add(self, entry: SolverEntry) -> RegistryBuilder:
        if entry.day in self._entries:
            raise DuplicateDay(entry.day)
        self._entries[entry.day] = entry
        return self

    def build(self) -> SolverRegistry:
        registry = SolverRegistry(self._entries)
        logger.debug(f"Built solver registry with {len(registry)} days")
        return registry


__all__ = (
    "FIRST_DAY",
    "LAST_DAY",
    "RegistryBuilder",
    "SolverEntry",
    "SolverRegistry",
    "validate_day",
)
