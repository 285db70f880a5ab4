"""Fluent argument checks."""

import logging
from collections.abc import Sized
from typing import Any, Generic, NoReturn, TypeVar

from argument_checker.config import CheckerSettings, get_settings
from argument_checker.defaults import default_for
from argument_checker.errors import (
    ArgumentError,
    ArgumentNoneError,
    CapabilityError,
    Violation,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _type_name(cls: type) -> str:
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


class ArgumentChecker(Generic[T]):
    """Precondition checks for a single argument.

    Every check returns the checker itself on success, so checks chain and
    the validated value can be read back from `value` at the end of the
    chain. A failed check raises immediately.

    Checks that depend on a capability of the value (ordering, ``len()``,
    text) are skipped when the value lacks it, unless
    ``settings.strict_capabilities`` is set, in which case they raise
    `CapabilityError`.

    Parameters
    ----------
    value : T
        The argument to check.
    name : str
        Display name of the argument, used in error messages.
    settings : CheckerSettings or None, optional
        Configuration for this checker. Defaults to `get_settings()`.

    Examples
    --------
    >>> class Order:
    ...     def __init__(self, quantity: int):
    ...         self.quantity = check_that(quantity, "quantity").is_greater_than(0).value
    """

    def __init__(self, value: T, name: str, settings: CheckerSettings | None = None):
        self._value = value
        self._name = name
        self._settings = settings if settings is not None else get_settings()

    @property
    def value(self) -> T:
        """The wrapped value, unchanged."""
        return self._value

    @property
    def name(self) -> str:
        return self._name

    @property
    def settings(self) -> CheckerSettings:
        return self._settings

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, value={self._format(self._value)})"

    def is_equal_to(self, expected: T) -> "ArgumentChecker[T]":
        """Check that the value equals ``expected``.

        Raises
        ------
        ArgumentError
            If the value is not equal to ``expected``.
        CapabilityError
            In strict mode, if ``==`` does not produce a truth value.
        """
        try:
            equal = bool(self._value == expected)
        except ValueError:
            return self._unsupported("is_equal_to", "boolean equality")
        if not equal:
            self._fail(
                "is_equal_to",
                f"{self._name} must equal {self._format(expected)}",
                expected=expected,
            )
        return self

    def is_not_default_value(self) -> "ArgumentChecker[T]":
        """Check that the value is not the default value for its type.

        Defaults are resolved with `argument_checker.defaults.default_for`.
        Types without a registered default only reject None.

        Raises
        ------
        ArgumentError
            If the value equals its type's default.
        """
        cls = type(self._value)
        default = default_for(cls)
        if default is None:
            is_default = self._value is None
        else:
            is_default = self._value == default
        if is_default:
            self._fail(
                "is_not_default_value",
                f"{self._name} cannot be the default value for {_type_name(cls)}",
                expected=default,
            )
        return self

    def is_not_empty(self) -> "ArgumentChecker[T]":
        """Check that a sized collection has at least one element.

        Strings are not treated as collections here; use
        `is_not_none_or_whitespace` for text. Values without ``len()``,
        including None, skip the check.

        Raises
        ------
        ArgumentError
            If the value is an empty collection.
        CapabilityError
            In strict mode, if the value is not a sized collection.
        """
        if isinstance(self._value, str) or not isinstance(self._value, Sized):
            return self._unsupported("is_not_empty", "len()")
        if len(self._value) == 0:
            self._fail("is_not_empty", f"{self._name} cannot be empty")
        return self

    def is_not_none(self) -> "ArgumentChecker[T]":
        """Check that the value is not None.

        Raises
        ------
        ArgumentNoneError
            If the value is None.
        """
        if self._value is None:
            self._fail("is_not_none", f"{self._name} cannot be None", error_cls=ArgumentNoneError)
        return self

    def is_not_none_or_whitespace(self) -> "ArgumentChecker[T]":
        """Check that the value is not None and, for strings, not blank.

        Raises
        ------
        ArgumentNoneError
            If the value is None.
        ArgumentError
            If the value is an empty or whitespace-only string.
        CapabilityError
            In strict mode, if the value is not a string.
        """
        self.is_not_none()
        if not isinstance(self._value, str):
            return self._unsupported("is_not_none_or_whitespace", "text")
        if not self._value or self._value.isspace():
            self._fail(
                "is_not_none_or_whitespace",
                f"{self._name} cannot be None, empty or whitespace",
            )
        return self

    def is_greater_than(self, bound: T) -> "ArgumentChecker[T]":
        """Check that the value is strictly greater than ``bound``.

        Values that cannot be ordered against ``bound``, or whose comparison
        has no truth value, skip the check.

        Raises
        ------
        ArgumentError
            If the value is less than or equal to ``bound``.
        CapabilityError
            In strict mode, if the value does not order against ``bound``.
        """
        try:
            ordered = bool(self._value > bound)
        except (TypeError, ValueError):
            return self._unsupported("is_greater_than", "ordering")
        if not ordered:
            self._fail(
                "is_greater_than",
                f"{self._name} must be greater than {self._format(bound)}, "
                f"actual value is {self._format(self._value)}",
                expected=bound,
            )
        return self

    def is_less_than(self, bound: T) -> "ArgumentChecker[T]":
        """Check that the value is strictly less than ``bound``.

        Values that cannot be ordered against ``bound``, or whose comparison
        has no truth value, skip the check.

        Raises
        ------
        ArgumentError
            If the value is greater than or equal to ``bound``.
        CapabilityError
            In strict mode, if the value does not order against ``bound``.
        """
        try:
            ordered = bool(self._value < bound)
        except (TypeError, ValueError):
            return self._unsupported("is_less_than", "ordering")
        if not ordered:
            self._fail(
                "is_less_than",
                f"{self._name} must be less than {self._format(bound)}, "
                f"actual value is {self._format(self._value)}",
                expected=bound,
            )
        return self

    def _format(self, value: Any) -> str:
        text = repr(value)
        max_len = self._settings.max_value_length
        if max_len is not None and len(text) > max_len:
            return text[:max_len] + "..."
        return text

    def _fail(
        self,
        check: str,
        message: str,
        *,
        expected: Any = None,
        error_cls: type[ArgumentError] = ArgumentError,
    ) -> NoReturn:
        violation = Violation(
            check=check,
            name=self._name,
            expected=expected,
            actual=self._value,
            message=message,
        )
        logger.debug("%s failed for %s: %s", check, self._name, message)
        raise error_cls(violation)

    def _unsupported(self, check: str, capability: str) -> "ArgumentChecker[T]":
        type_name = _type_name(type(self._value))
        if self._settings.strict_capabilities:
            self._fail(
                check,
                f"{self._name} cannot be checked with {check}: {type_name} has no {capability}",
                error_cls=CapabilityError,
            )
        logger.debug("Skipping %s for %s: %s has no %s", check, self._name, type_name, capability)
        return self


def check_that(value: T, name: str, *, settings: CheckerSettings | None = None) -> ArgumentChecker[T]:
    """Wrap ``value`` in an `ArgumentChecker`.

    Shorthand for ``ArgumentChecker(value, name)``::

        self.quantity = check_that(quantity, "quantity").is_not_none().is_greater_than(0).value
    """
    return ArgumentChecker(value, name, settings=settings)
