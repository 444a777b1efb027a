from __future__ import annotations

import re
from datetime import timedelta

import pytest
from hypothesis import given, strategies as st

from aoc2022.errors import InputNotFound, SolverError, UnknownDay
from aoc2022.inputs import StaticInputLoader
from aoc2022.protocols.type_aliases import Answer, AnswerValue
from aoc2022.registry import RegistryBuilder, SolverRegistry
from aoc2022.runner import Report, Runner, SolverResult

DONE_LINE = re.compile(r"^Done in \d+ms$")


def count_lines(text: str) -> Answer:
    return Answer("Number of lines", len(text.splitlines()))


def fail(text: str) -> Answer:
    raise ValueError(f"Invalid input: {text!r}")


def test_run(toy_registry: SolverRegistry, toy_loader: StaticInputLoader) -> None:
    report = Runner(toy_registry, toy_loader).run(1)
    lines = report.lines()

    assert lines[:2] == ["1:1 — Number of lines: 2", "1:2 — Number of words: 3"]
    assert DONE_LINE.match(lines[2])
    assert len(lines) == 3
    assert str(report) == "\n".join(lines)
    assert report.values == (2, 3)


def test_results_are_timed(toy_registry: SolverRegistry, toy_loader: StaticInputLoader) -> None:
    report = Runner(toy_registry, toy_loader).run(1)

    assert [result.part for result in report.results] == [1, 2]
    assert all(result.elapsed >= timedelta(0) for result in report.results)


def test_single_part() -> None:
    registry = RegistryBuilder().register(4, count_lines).build()

    report = Runner(registry, StaticInputLoader({4: "x"})).run(4)

    assert len(report.results) == 1
    assert report.lines()[0] == "4:1 — Number of lines: 1"


def test_solvers_may_return_plain_tuples() -> None:
    registry = RegistryBuilder().register(1, lambda text: ("Echo", text)).build()

    assert Runner(registry, StaticInputLoader({1: "hi"})).run(1).values == ("hi",)


def test_unknown_day_fails_before_loading(toy_registry: SolverRegistry) -> None:
    class ExplodingLoader:
        def load(self, day: int) -> str:
            raise AssertionError("The input should not be loaded")

    with pytest.raises(UnknownDay):
        Runner(toy_registry, ExplodingLoader()).run(99)


def test_missing_input(toy_registry: SolverRegistry) -> None:
    with pytest.raises(InputNotFound):
        Runner(toy_registry, StaticInputLoader({})).run(1)


def test_solver_errors_are_wrapped() -> None:
    calls = []

    def part_2(text: str) -> Answer:
        calls.append(text)
        return Answer("Never", 0)

    registry = RegistryBuilder().register(2, fail, part_2).build()

    with pytest.raises(SolverError) as exc_info:
        Runner(registry, StaticInputLoader({2: "bad"})).run(2)

    error = exc_info.value
    assert (error.day, error.part) == (2, 1)
    assert isinstance(error.cause, ValueError)
    assert error.__cause__ is error.cause
    assert str(error) == "Day 2 part 1 failed: ValueError: Invalid input: 'bad'"
    assert calls == []


def test_part_2_failure() -> None:
    registry = RegistryBuilder().register(3, count_lines, fail).build()

    with pytest.raises(SolverError) as exc_info:
        Runner(registry, StaticInputLoader({3: "x"})).run(3)

    assert exc_info.value.part == 2


def test_malformed_answer_is_a_solver_error() -> None:
    registry = RegistryBuilder().register(1, lambda text: 42).build()  # type: ignore[arg-type,return-value]

    with pytest.raises(SolverError):
        Runner(registry, StaticInputLoader({1: ""})).run(1)


def test_part_2_uses_part_1() -> None:
    def part_2(text: str, previous: AnswerValue) -> Answer:
        assert isinstance(previous, int)
        return Answer("Twice part 1", previous * 2)

    registry = RegistryBuilder().register(1, count_lines, part_2, part_2_uses_part_1=True).build()

    assert Runner(registry, StaticInputLoader({1: "a\nb\nc"})).run(1).values == (3, 6)


@given(st.text(alphabet="ab \n", max_size=50))
def test_runs_are_idempotent(text: str) -> None:
    registry = RegistryBuilder().register(1, count_lines, lambda t: ("Words", len(t.split()))).build()
    runner = Runner(registry, StaticInputLoader({1: text}))

    assert runner.run(1).values == runner.run(1).values


def test_timings_are_logged(
    toy_registry: SolverRegistry, toy_loader: StaticInputLoader, caplog: pytest.LogCaptureFixture
) -> None:
    Runner(toy_registry, toy_loader).run(1)

    assert "Day 1 part 1 solved in" in caplog.text
    assert "Day 1 part 2 solved in" in caplog.text
    assert "Day 1 done in" in caplog.text


def test_report_rendering() -> None:
    result = SolverResult(5, 1, "Top crates", "CMZ", timedelta(milliseconds=3))
    report = Report(5, (result,), timedelta(microseconds=7900))

    assert str(result) == "5:1 — Top crates: CMZ"
    assert report.lines() == ["5:1 — Top crates: CMZ", "Done in 7ms"]


def test_day_1_report() -> None:
    registry = (
        RegistryBuilder()
        .register(
            1,
            lambda text: ("Maximum calories held by one Elf", 68467),
            lambda text: ("Sum of top three calories held by Elves", 203420),
        )
        .build()
    )

    lines = str(Runner(registry, StaticInputLoader({1: ""})).run(1)).split("\n")

    assert lines[:2] == [
        "1:1 — Maximum calories held by one Elf: 68467",
        "1:2 — Sum of top three calories held by Elves: 203420",
    ]
    assert DONE_LINE.match(lines[2])
    assert len(lines) == 3
