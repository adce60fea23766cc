"""Internal helpers for settled.

Bridges between raw awaitables and Result values, shared by the
orchestration modules. Not part of the public API."""

from __future__ import annotations

import asyncio
import typing

from kungfu import Error, Ok, Result

from ._types import Operation


def as_result(value: typing.Any) -> Result[typing.Any, typing.Any]:
    """Ok / Error kept as is, any other value wrapped in Ok."""
    match value:
        case Ok() | Error():
            return value
        case _:
            return Ok(value)


def outcome(future: asyncio.Future[typing.Any]) -> Result[typing.Any, typing.Any]:
    """
    Read the outcome of a done future as a Result.

    - Exception -> Error(exc)
    - Ok / Error value -> kept as is
    - anything else -> Ok(value)
    - cancelled -> Error(CancelledError())
    """
    if future.cancelled():
        return Error(asyncio.CancelledError())

    exc = future.exception()
    if exc is not None:
        if not isinstance(exc, Exception):
            raise exc
        return Error(exc)

    return as_result(future.result())


async def settle(operation: Operation[typing.Any]) -> Result[typing.Any, typing.Any]:
    """
    Wait until operation settles and return its outcome as a Result.

    NOTE: asyncio.wait is used instead of awaiting the future directly,
          so cancelling the caller never cancels the operation.
    """
    future = asyncio.ensure_future(operation)
    await asyncio.wait((future,))
    return outcome(future)


def completed() -> asyncio.Future[None]:
    """Already resolved future carrying no payload."""
    future: asyncio.Future[None] = asyncio.get_running_loop().create_future()
    future.set_result(None)
    return future


__all__ = (
    "as_result",
    "completed",
    "outcome",
    "settle",
)
