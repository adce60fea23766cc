from .ignore import ignore_errors
from .ordered import Step, execute_ordered

__all__ = (
    # Best effort
    "ignore_errors",
    # Ordered steps
    "Step",
    "execute_ordered",
)
