"""
Core type definitions for settled.

Aliases shared by the orchestration primitives.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

from kungfu import LazyCoroResult

# ============================================================================
# Type aliases
# ============================================================================

# Operation = something that eventually settles (task, future, coroutine,
# LazyCoroResult). Awaiting it yields a plain value or a Result.
type Operation[T] = Awaitable[T]

# StepCall = callable that starts an operation when invoked
type StepCall = Callable[..., typing.Any]

# NoError = "never fails"
# NOTE: Never is the bottom type, no error value can be constructed.
type NoError = typing.Never

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# LCR = LazyCoroResult shortcut
type LCR[T, E] = LazyCoroResult[T, E]

__all__ = (
    "Operation",
    "StepCall",
    "NoError",
    "LCR",
)
