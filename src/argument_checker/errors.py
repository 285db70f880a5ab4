"""Error types raised by argument checks."""

from typing import Any

from pydantic import BaseModel


class Violation(BaseModel):
    """Description of a failed argument check.

    Attributes
    ----------
    check : str
        Name of the check method that failed.
    name : str
        Display name of the checked argument.
    expected : Any
        Expected value or bound, when the check has one.
    actual : Any
        The value that was checked.
    message : str
        Human-readable explanation, identical to ``str(error)``.
    """

    check: str
    name: str
    expected: Any = None
    actual: Any = None
    message: str


class ArgumentError(ValueError):
    """ValueError with attached Violation."""

    def __init__(self, violation: Violation):
        self.violation = violation
        self.name = violation.name
        super().__init__(violation.message)


class ArgumentNoneError(ArgumentError):
    """Raised when a required argument is None."""


class CapabilityError(ArgumentError, TypeError):
    """Raised in strict mode when a check does not apply to the value's type."""
