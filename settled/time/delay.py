"""Delay primitive

Pause for a fixed duration."""

from __future__ import annotations

import asyncio

from kungfu import LazyCoroResult, Ok, Result

from .._types import NoError


def wait(seconds: float) -> LazyCoroResult[None, NoError]:
    """
    Succeed with no payload after at least `seconds`.

    Always yields to the event loop, even for 0. Not cancellable on its own;
    compose with timeout() or cancel the awaiting task.
    """
    if seconds < 0:
        raise ValueError("wait() requires a non-negative duration")

    async def run() -> Result[None, NoError]:
        await asyncio.sleep(seconds)
        return Ok(None)

    return LazyCoroResult(run)


__all__ = ("wait",)
