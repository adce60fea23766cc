"""Best-effort combinators

Turn a failing operation into "no result"."""

from __future__ import annotations

import logging

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import settle
from .._types import NoError, Operation

logger = logging.getLogger("settled.control")


def ignore_errors[T](operation: Operation[T]) -> LazyCoroResult[T | None, NoError]:
    """
    Ok(value) if operation succeeds, Ok(None) if it fails.

    Only for best-effort paths: the failure is gone for the caller,
    it survives only as a debug log record.
    """

    async def run() -> Result[T | None, NoError]:
        r = await settle(operation)
        match r:
            case Ok(v):
                return Ok(v)
            case Error(e):
                logger.debug("ignoring failure: %r", e)
                return Ok(None)

    return LazyCoroResult(run)


__all__ = ("ignore_errors",)
