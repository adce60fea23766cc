from __future__ import annotations

import asyncio

from kungfu import Error, Ok

from settled import ignore_errors


def run_async(coro):
    return asyncio.run(coro)


def test_failure_becomes_none():
    async def scenario() -> None:
        async def failing() -> str:
            raise ConnectionError("offline")

        result = await ignore_errors(failing())
        match result:
            case Ok(value):
                assert value is None
            case Error(err):
                raise AssertionError(f"failure leaked: {err!r}")

    run_async(scenario())


def test_error_result_becomes_none():
    async def scenario() -> None:
        async def denied() -> object:
            return Error("denied")

        result = await ignore_errors(denied())
        match result:
            case Ok(value):
                assert value is None
            case Error(err):
                raise AssertionError(f"failure leaked: {err!r}")

    run_async(scenario())


def test_success_value_is_kept():
    async def scenario() -> None:
        async def fetch() -> dict[str, int]:
            await asyncio.sleep(0)
            return {"unread": 3}

        result = await ignore_errors(fetch())
        match result:
            case Ok(value):
                assert value == {"unread": 3}
            case Error(err):
                raise AssertionError(f"unexpected failure: {err!r}")

    run_async(scenario())
