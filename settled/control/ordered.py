"""Ordered step combinators

Run declared steps in order, where each step either blocks the next one
or lets it start right away."""

from __future__ import annotations

import asyncio
import inspect
import logging
import typing
from collections.abc import Iterable
from dataclasses import dataclass

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import ConstructionError
from .._helpers import as_result, completed, settle
from .._types import StepCall
from ..concurrency import all_settled

logger = logging.getLogger("settled.control")


@dataclass(frozen=True, slots=True)
class Step:
    """
    One entry of an ordered pipeline.

    `receiver`, when set, is passed as the first positional argument, so an
    unbound method can be run against an instance: Step(Cache.load, ("key",), receiver=cache).
    `blocking` makes the next step wait until this one has settled.
    """

    operation: StepCall
    arguments: tuple[typing.Any, ...] = ()
    receiver: typing.Any = None
    blocking: bool = False

    def __post_init__(self) -> None:
        if not callable(self.operation):
            raise TypeError("Step.operation must be callable")
        object.__setattr__(self, "arguments", tuple(self.arguments))

    def invoke(self) -> typing.Any:
        if self.receiver is None:
            return self.operation(*self.arguments)
        return self.operation(self.receiver, *self.arguments)


async def _run_step(
    index: int,
    step: Step,
    dependency: asyncio.Future[typing.Any],
) -> Result[typing.Any, typing.Any]:
    # Outcome of the dependency does not matter, only that it settled.
    await asyncio.wait((dependency,))

    try:
        operation = step.invoke()
    except Exception as exc:
        logger.warning("step %d raised before starting: %r", index, exc)
        return Error(ConstructionError(index, exc))

    if not inspect.isawaitable(operation):
        return as_result(operation)
    return await settle(operation)


def execute_ordered[E](steps: Iterable[Step]) -> LazyCoroResult[None, E]:
    """
    Run steps in declaration order.

    Each step starts once the latest blocking step before it has settled,
    successfully or not. Non-blocking steps do not hold back the steps after
    them, but the overall result still waits for them: Ok(None) if every step
    succeeded, otherwise the first failure to settle (see all_settled).

    A step that raises when invoked counts as failed with ConstructionError;
    later steps run anyway. No steps -> Ok(None).
    """
    ordered = tuple(steps)

    async def run() -> Result[None, E]:
        if not ordered:
            return Ok(None)

        dependency: asyncio.Future[typing.Any] = completed()
        receiver = ordered[0].receiver
        tracked: list[asyncio.Task[Result[typing.Any, typing.Any]]] = []

        for index, step in enumerate(ordered):
            if step.receiver is not None:
                receiver = step.receiver
            task = asyncio.create_task(_run_step(index, step, dependency))
            tracked.append(task)
            if step.blocking:
                dependency = task

        logger.debug("scheduled %d steps, last receiver %r", len(tracked), receiver)
        return await all_settled(*tracked)

    return LazyCoroResult(run)


__all__ = ("Step", "execute_ordered")
