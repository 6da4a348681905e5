"""Enforcing versions of the predicate checks.

Each function here has the same name, parameters and semantics as its
counterpart in ``precond.check``, but raises the violation instead of
returning it. On success they return None with no observable effect.

These are fail-fast: no recovery, no fallback, no silence. Use them for
conditions that can only be false because of a bug. Conditions that may
legitimately fail at runtime belong in ``precond.check``.
"""

import logging
from typing import Any, Optional, TypeVar

from precond import check
from precond.failure import PreconditionViolation

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _raise_if_violated(violation: Optional[PreconditionViolation]) -> None:
    if violation is not None:
        logger.debug("Precondition violated: %s", violation)
        raise violation


def is_true(predicate: bool, message: str, *args: Any) -> None:
    """Raise if given predicate is not true.

    Parameters
    ----------
    predicate : bool
        The condition that must hold.
    message : str
        printf-style template for the error message.
    *args
        Values substituted into ``message`` on failure.

    Raises
    ------
    PreconditionViolation
        If predicate is false. This indicates a bug in the caller.

    Examples
    --------
    >>> is_true(len(items) > 0, "expected at least one item, got %d", len(items))
    """
    _raise_if_violated(check.is_true(predicate, message, *args))


def is_false(anti_predicate: bool, message: str, *args: Any) -> None:
    """Raise if given predicate is not false."""
    _raise_if_violated(check.is_false(anti_predicate, message, *args))


def is_none(value: Optional[T], message: str, *args: Any) -> None:
    """Raise if given value is not None."""
    _raise_if_violated(check.is_none(value, message, *args))


def is_not_none(value: Optional[T], message: str, *args: Any) -> None:
    """Raise if given value is None."""
    _raise_if_violated(check.is_not_none(value, message, *args))


def in_range_epsilon(
    value: float,
    lower: float,
    upper: float,
    epsilon: float,
    message: str,
    *args: Any,
) -> None:
    """Raise if value is not in <lower, upper> widened by epsilon.

    See ``precond.check.in_range_epsilon`` for the exact boundary rule.
    """
    _raise_if_violated(
        check.in_range_epsilon(value, lower, upper, epsilon, message, *args)
    )


def in_range(value: float, lower: float, upper: float, message: str, *args: Any) -> None:
    """Raise if value is not in <lower, upper>, using an epsilon of 0.00001."""
    _raise_if_violated(check.in_range(value, lower, upper, message, *args))


__all__ = [
    "is_true",
    "is_false",
    "is_none",
    "is_not_none",
    "in_range_epsilon",
    "in_range",
]
