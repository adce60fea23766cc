"""
All-settled combinator
======================

Wait for every operation, report one failure only after all have settled.
"""

from __future__ import annotations

import asyncio
import logging
import typing

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import settle
from .._types import Operation

logger = logging.getLogger("settled.concurrency")


def all_settled[E](*operations: Operation[typing.Any]) -> LazyCoroResult[None, E]:
    """
    Succeed once every operation has settled and none failed.

    If at least one failed, fail with the first failure in settlement order,
    but only after the remaining operations have settled too. Inputs are
    observed, never cancelled or retried. No operations -> Ok(None).
    """

    async def run() -> Result[None, E]:
        if not operations:
            return Ok(None)

        first_error: Result[None, E] | None = None
        failed = 0

        for next_settled in asyncio.as_completed([settle(op) for op in operations]):
            result = await next_settled
            match result:
                case Error(err):
                    failed += 1
                    if first_error is None:
                        first_error = Error(err)
                        logger.debug("first failure observed: %r", err)
                case Ok(_):
                    pass

        if first_error is None:
            return Ok(None)

        logger.debug("%d of %d operations failed", failed, len(operations))
        return first_error

    return LazyCoroResult(run)


__all__ = ("all_settled",)
