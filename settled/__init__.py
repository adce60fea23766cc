"""
Async task orchestration primitives.

Small combinators over asyncio awaitables that report outcomes as
kungfu Results:

- all_settled      - wait for everything, then report the first failure
- execute_ordered  - declared steps, each blocking the next or not
- timeout          - stop listening to an operation after a deadline
- ignore_errors    - best effort, failure becomes None
- wait             - plain delay

Plus the collection and text helpers shipped alongside them.
"""

# Core types
from ._types import LCR, NoError, Operation, StepCall

# Concurrency
from .concurrency import all_settled

# Control flow
from .control import Step, execute_ordered, ignore_errors

# Time operations
from .time import timeout, wait

# Helpers
from . import collection, text

# Errors
from ._errors import ConstructionError, DeadlineExceeded

__all__ = (
    # Types
    "LCR",
    "NoError",
    "Operation",
    "StepCall",
    # Concurrency
    "all_settled",
    # Control
    "Step",
    "execute_ordered",
    "ignore_errors",
    # Time
    "timeout",
    "wait",
    # Helper modules
    "collection",
    "text",
    # Errors
    "ConstructionError",
    "DeadlineExceeded",
)
