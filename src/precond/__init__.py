"""`precond` - precondition checks with formatted messages.

Two layers share one set of predicates:

- precond.check: returns a PreconditionViolation (or None), never raises
- precond (precond.enforce): raises the PreconditionViolation

Key principle:
- Use precond.check when the caller is expected to handle the failure
- Use precond.<check> when failure can only mean a bug

>>> import precond
>>> precond.in_range(ratio, 0, 1, "ratio %s outside <0, 1>", ratio)
"""

from precond.check import DEFAULT_EPSILON
from precond.enforce import (
    is_true,
    is_false,
    is_none,
    is_not_none,
    in_range_epsilon,
    in_range,
)
from precond.failure import PreconditionViolation
from precond.message import ViolationMessage

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_EPSILON",
    "PreconditionViolation",
    "ViolationMessage",
    "is_true",
    "is_false",
    "is_none",
    "is_not_none",
    "in_range_epsilon",
    "in_range",
]
