from __future__ import annotations


class DeadlineExceeded(Exception):
    """Operation did not settle before its deadline."""

    timeout = True
    seconds: float

    def __init__(self, seconds: float) -> None:
        self.seconds = seconds
        super().__init__(f"Deadline of {seconds}s exceeded")


class ConstructionError(Exception):
    """Pipeline step raised while being invoked, before producing an operation."""

    index: int
    cause: Exception

    def __init__(self, index: int, cause: Exception) -> None:
        self.index = index
        self.cause = cause
        super().__init__(f"Step {index} failed to start: {cause!r}")
        self.__cause__ = cause


__all__ = ("ConstructionError", "DeadlineExceeded")
