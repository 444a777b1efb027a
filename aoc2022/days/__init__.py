from __future__ import annotations

from types import ModuleType

from aoc2022.registry import RegistryBuilder, SolverRegistry

from . import (
    day_1,
    day_2,
    day_3,
    day_4,
    day_5,
    day_6,
    day_7,
    day_8,
    day_9,
    day_10,
    day_11,
    day_12,
    day_13,
    day_14,
    day_15,
)

DAYS: tuple[ModuleType, ...] = (
    day_1,
    day_2,
    day_3,
    day_4,
    day_5,
    day_6,
    day_7,
    day_8,
    day_9,
    day_10,
    day_11,
    day_12,
    day_13,
    day_14,
    day_15,
)


def build_registry() -> SolverRegistry:
    """Register the solutions of every day solved so far."""
    builder = RegistryBuilder()
    for day, module in enumerate(DAYS, 1):
        builder.register(day, module.part_1, module.part_2)
    return builder.build()


__all__ = ("DAYS", "build_registry")
