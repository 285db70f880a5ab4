"""Argument Checker - fluent precondition checks for function arguments."""

from .checker import ArgumentChecker, check_that
from .config import CheckerSettings, get_settings
from .defaults import default_for, has_default, register_default
from .errors import ArgumentError, ArgumentNoneError, CapabilityError, Violation
from .version import __version__


__all__ = [
    # Checks
    "ArgumentChecker",
    "check_that",
    # Errors
    "ArgumentError",
    "ArgumentNoneError",
    "CapabilityError",
    "Violation",
    # Defaults
    "default_for",
    "has_default",
    "register_default",
    # Configuration
    "CheckerSettings",
    "get_settings",
]
