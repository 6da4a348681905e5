"""Violation messages - template plus ordered arguments.

A violation description is built, only when a check fails, from a printf-style
template and the arguments supplied by the caller. Both travel together as one frozen
pydantic model so the pair is never split or re-spread along the way.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class PrecondBaseModel(BaseModel):
    """Base model for all precond value objects.

    - No extra fields allowed
    - Immutable after construction
    - Strict about the template being a string (no coercion)
    """

    model_config = ConfigDict(
        extra='forbid',
        frozen=True,
        strict=True,
    )


class ViolationMessage(PrecondBaseModel):
    """Message template and the arguments substituted into it on failure.

    Formatting mirrors how the standard ``logging`` module renders records:

    - no arguments: the template is returned verbatim
    - a single non-empty mapping: ``template % mapping`` (``%(name)s`` style)
    - otherwise: ``template % args``

    Rendering never raises. When the template does not match its arguments, or
    an argument fails to format, the result is the template followed by the
    argument tuple.

    Examples
    --------
    >>> ViolationMessage(template="value %s invalid", args=(42,)).render()
    'value 42 invalid'
    >>> ViolationMessage(template="%(name)s missing", args=({"name": "x"},)).render()
    'x missing'
    """

    template: str
    args: tuple[Any, ...] = ()

    def render(self) -> str:
        if not self.args:
            return self.template

        try:
            args = self.args
            if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
                args = args[0]
            return self.template % args
        except Exception as e:
            logger.warning(
                "Cannot format violation message %r with %d argument(s): %s",
                self.template, len(self.args), type(e).__name__,
            )
            return f"{self.template} {_safe_tuple_repr(self.args)}"


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return object.__repr__(value)


def _safe_tuple_repr(values: tuple[Any, ...]) -> str:
    items = [_safe_repr(v) for v in values]
    if len(items) == 1:
        return f"({items[0]},)"
    return f"({', '.join(items)})"
