"""Failure type shared by both layers.

Checks return it, enforcement raises it. There is exactly one kind of
failure: a predicate violation, parameterized by its formatted message.
"""

from precond.message import ViolationMessage


class PreconditionViolation(RuntimeError):
    """A predicate the caller required to hold did not hold.

    This indicates a bug in the calling code, not bad user input. Expected,
    recoverable failures should be handled through ``precond.check`` and the
    returned value, never by catching this exception.

    Key distinction:
    - ValueError: bad user/config input, handled where it is parsed
    - PreconditionViolation: programmer error, left to propagate

    Attributes
    ----------
    message : ViolationMessage
        Template and arguments the description was built from.
    description : str
        The formatted text, identical to ``str(violation)``.
    """

    def __init__(self, message: ViolationMessage):
        self.message = message
        self.description = message.render()
        super().__init__(self.description)

    def __reduce__(self):
        return (type(self), (self.message,))
