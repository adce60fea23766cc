from .delay import wait
from .timeout import timeout

__all__ = (
    # Delay
    "wait",
    # Deadline
    "timeout",
)
