"""Deadline guard

Stop listening to an operation once its deadline passes."""

from __future__ import annotations

import asyncio
import logging
import typing

from kungfu import Error, LazyCoroResult, Result

from .._errors import DeadlineExceeded
from .._helpers import outcome
from .._types import Operation

logger = logging.getLogger("settled.time")

# Operations abandoned at their deadline, held until they settle.
# The event loop only keeps weak references to tasks.
_abandoned: set[asyncio.Future[typing.Any]] = set()


def _discard_late(future: asyncio.Future[typing.Any]) -> None:
    _abandoned.discard(future)
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.debug("late failure after deadline discarded: %r", exc)


def timeout[T, E](
    operation: Operation[T],
    *,
    seconds: float,
) -> LazyCoroResult[T, E | DeadlineExceeded]:
    """
    Outcome of `operation` if it settles within `seconds`,
    Error(DeadlineExceeded) otherwise.

    The operation itself is never cancelled: on timeout it keeps running
    in the background and its late outcome is dropped.
    """
    if seconds < 0:
        raise ValueError("timeout() requires a non-negative duration")

    async def run() -> Result[T, E | DeadlineExceeded]:
        future = asyncio.ensure_future(operation)
        # NOTE: asyncio.wait cancels its timer as soon as the future is done
        #       and, unlike wait_for, leaves the future running on timeout.
        done, _ = await asyncio.wait((future,), timeout=seconds)
        if not done:
            logger.debug("operation still pending after %ss, giving up", seconds)
            _abandoned.add(future)
            future.add_done_callback(_discard_late)
            return Error(DeadlineExceeded(seconds))
        return outcome(future)

    return LazyCoroResult(run)


__all__ = ("timeout",)
