from __future__ import annotations

import asyncio
import time

import pytest
from kungfu import Error, Ok

from settled import ConstructionError, Step, execute_ordered


def run_async(coro):
    return asyncio.run(coro)


class Timeline:
    def __init__(self) -> None:
        self.origin = time.monotonic()
        self.started: dict[str, float] = {}
        self.finished: dict[str, float] = {}
        self.order: list[str] = []

    async def step(self, name: str, seconds: float, error: Exception | None = None) -> str:
        self.started[name] = time.monotonic() - self.origin
        self.order.append(name)
        await asyncio.sleep(seconds)
        self.finished[name] = time.monotonic() - self.origin
        if error is not None:
            raise error
        return name


def test_non_blocking_step_does_not_hold_back_the_next_one():
    async def scenario() -> None:
        timeline = Timeline()
        result = await execute_ordered(
            [
                Step(timeline.step, ("A", 0.05), blocking=True),
                Step(timeline.step, ("B", 0.3), blocking=False),
                Step(timeline.step, ("C", 0.01), blocking=True),
            ]
        )
        total = time.monotonic() - timeline.origin

        assert timeline.order == ["A", "B", "C"]
        assert timeline.started["B"] >= timeline.finished["A"]
        assert timeline.started["C"] >= timeline.finished["A"]
        # C ran alongside B instead of after it
        assert timeline.finished["C"] < 0.2
        assert timeline.finished["C"] < timeline.finished["B"]
        # the overall result still waited for B
        assert total >= 0.3
        match result:
            case Ok(value):
                assert value is None
            case Error(err):
                raise AssertionError(f"unexpected failure: {err!r}")

    run_async(scenario())


def test_blocking_steps_run_one_after_another():
    async def scenario() -> None:
        timeline = Timeline()
        await execute_ordered(
            [
                Step(timeline.step, ("first", 0.05), blocking=True),
                Step(timeline.step, ("second", 0.02), blocking=True),
                Step(timeline.step, ("third", 0.01), blocking=True),
            ]
        )

        assert timeline.order == ["first", "second", "third"]
        assert timeline.started["second"] >= timeline.finished["first"]
        assert timeline.started["third"] >= timeline.finished["second"]

    run_async(scenario())


def test_consecutive_non_blocking_steps_start_together():
    async def scenario() -> None:
        timeline = Timeline()
        await execute_ordered(
            [
                Step(timeline.step, ("one", 0.1)),
                Step(timeline.step, ("two", 0.1)),
                Step(timeline.step, ("three", 0.1)),
            ]
        )
        total = time.monotonic() - timeline.origin

        assert timeline.order == ["one", "two", "three"]
        assert max(timeline.started.values()) < 0.05
        assert total < 0.25

    run_async(scenario())


def test_failed_blocking_step_does_not_abort_later_steps():
    async def scenario() -> None:
        timeline = Timeline()
        boom = RuntimeError("step failed")
        result = await execute_ordered(
            [
                Step(timeline.step, ("broken", 0.01, boom), blocking=True),
                Step(timeline.step, ("after", 0.01), blocking=True),
            ]
        )

        assert timeline.order == ["broken", "after"]
        assert timeline.started["after"] >= timeline.finished["broken"]
        match result:
            case Error(err):
                assert err is boom
            case Ok(_):
                raise AssertionError("expected failure")

    run_async(scenario())


def test_step_raising_on_invocation_is_absorbed():
    async def scenario() -> None:
        timeline = Timeline()
        cause = ValueError("bad arguments")

        def explode() -> None:
            raise cause

        result = await execute_ordered(
            [
                Step(explode, blocking=True),
                Step(timeline.step, ("still runs", 0.01), blocking=True),
            ]
        )

        assert timeline.order == ["still runs"]
        match result:
            case Error(err):
                assert isinstance(err, ConstructionError)
                assert err.index == 0
                assert err.cause is cause
            case Ok(_):
                raise AssertionError("expected failure")

    run_async(scenario())


def test_receiver_is_passed_as_first_argument():
    class Counter:
        def __init__(self) -> None:
            self.value = 0

        async def bump(self, amount: int) -> int:
            await asyncio.sleep(0)
            self.value += amount
            return self.value

    async def scenario() -> None:
        counter = Counter()
        result = await execute_ordered(
            [
                Step(Counter.bump, (2,), receiver=counter, blocking=True),
                Step(Counter.bump, [3], receiver=counter, blocking=True),
            ]
        )

        assert counter.value == 5
        match result:
            case Ok(_):
                pass
            case Error(err):
                raise AssertionError(f"unexpected failure: {err!r}")

    run_async(scenario())


def test_plain_return_values_count_as_success():
    async def scenario() -> None:
        seen: list[int] = []
        result = await execute_ordered([Step(seen.append, (1,)), Step(seen.append, (2,))])

        assert seen == [1, 2]
        match result:
            case Ok(_):
                pass
            case Error(err):
                raise AssertionError(f"unexpected failure: {err!r}")

    run_async(scenario())


def test_empty_pipeline_succeeds_immediately():
    async def scenario() -> None:
        result = await execute_ordered([])
        match result:
            case Ok(value):
                assert value is None
            case Error(err):
                raise AssertionError(f"unexpected failure: {err!r}")

    run_async(scenario())


def test_step_requires_callable_operation():
    with pytest.raises(TypeError):
        Step("not callable")  # type: ignore[arg-type]


def test_step_returning_error_directly_counts_as_failure():
    async def scenario() -> None:
        result = await execute_ordered([Step(lambda: Error("denied")), Step(lambda: Ok(1))])
        match result:
            case Error(err):
                assert err == "denied"
            case Ok(_):
                raise AssertionError("expected failure")

    run_async(scenario())
