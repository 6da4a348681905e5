"""Predicate checks that report violations instead of raising.

Every check returns ``None`` when its predicate holds and a
``PreconditionViolation`` describing the failure when it does not. Nothing
here raises or logs on a passing check, so library code can use these to
return errors to its callers rather than aborting.

The trailing ``message`` is a printf-style template; ``*args`` are
substituted into it only when the check fails.

>>> from precond import check
>>> check.in_range(0.5, 0, 1, "ratio %s out of range", 0.5) is None
True
>>> str(check.is_true(False, "value %s invalid", 42))
'value 42 invalid'
"""

from typing import Any, Optional, TypeVar

from precond.failure import PreconditionViolation
from precond.message import ViolationMessage

T = TypeVar("T")

DEFAULT_EPSILON = 0.00001


def is_true(predicate: bool, message: str, *args: Any) -> Optional[PreconditionViolation]:
    """Return None if predicate is true, otherwise a violation."""
    if not predicate:
        return PreconditionViolation(ViolationMessage(template=message, args=args))
    return None


def is_false(anti_predicate: bool, message: str, *args: Any) -> Optional[PreconditionViolation]:
    """Return None if anti_predicate is false, otherwise a violation."""
    return is_true(not anti_predicate, message, *args)


def is_none(value: Optional[T], message: str, *args: Any) -> Optional[PreconditionViolation]:
    """Return None if value is None, otherwise a violation."""
    return is_true(value is None, message, *args)


def is_not_none(value: Optional[T], message: str, *args: Any) -> Optional[PreconditionViolation]:
    """Return None if value is not None, otherwise a violation."""
    return is_true(value is not None, message, *args)


def in_range_epsilon(
    value: float,
    lower: float,
    upper: float,
    epsilon: float,
    message: str,
    *args: Any,
) -> Optional[PreconditionViolation]:
    """Check that value lies in <lower, upper> widened by epsilon.

    The test is a strict inequality on both sides::

        value - lower + epsilon > 0 and upper - value + epsilon > 0

    so a value sitting exactly on ``lower`` or ``upper`` passes only for a
    positive epsilon, and a value exactly ``epsilon`` beyond a bound fails.
    NaN in any operand fails.
    All four operands must combine arithmetically, so ``Decimal`` inputs need
    a ``Decimal`` epsilon.

    Parameters
    ----------
    value : float
        Number under test.
    lower, upper : float
        Nominal bounds of the range.
    epsilon : float
        Tolerance added to both bounds to absorb floating-point error.
    message : str
        Template for the violation description.
    *args
        Values substituted into ``message`` on failure.

    Returns
    -------
    PreconditionViolation or None
    """
    predicate = value - lower + epsilon > 0 and upper - value + epsilon > 0
    return is_true(predicate, message, *args)


def in_range(
    value: float,
    lower: float,
    upper: float,
    message: str,
    *args: Any,
) -> Optional[PreconditionViolation]:
    """Same as ``in_range_epsilon`` with ``DEFAULT_EPSILON`` (0.00001).

    The default epsilon is a float, so operands must combine with float
    (int, float, numpy scalars, Fraction). For Decimal use ``in_range_epsilon``.
    """
    return in_range_epsilon(value, lower, upper, DEFAULT_EPSILON, message, *args)


__all__ = [
    "DEFAULT_EPSILON",
    "is_true",
    "is_false",
    "is_none",
    "is_not_none",
    "in_range_epsilon",
    "in_range",
]
