"""Default ("zero") values per type."""

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from fractions import Fraction
from typing import Any
from uuid import UUID

# Value-like types only. Any other type defaults to None.
_REGISTRY: dict[type, Any] = {
    type(None): None,
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
    Decimal: Decimal(0),
    Fraction: Fraction(0),
    UUID: UUID(int=0),
    datetime: datetime.min,
    date: date.min,
    time: time(),
    timedelta: timedelta(0),
}


def register_default(cls: type, value: Any) -> None:
    """Register the default value for ``cls``, replacing any existing entry.

    Parameters
    ----------
    cls : type
        Type the default applies to. Subclasses inherit it unless they
        register their own.
    value : Any
        Value considered the default for ``cls``.
    """
    _REGISTRY[cls] = value


def default_for(cls: type) -> Any:
    """Return the default value for ``cls``.

    Registered defaults are looked up along the MRO. Types with no entry,
    such as ``str``, collections and user classes, default to None. The type
    itself is never instantiated.

    Parameters
    ----------
    cls : type
        Type to resolve.

    Returns
    -------
    Any
        The default value.
    """
    for klass in cls.__mro__:
        if klass in _REGISTRY:
            return _REGISTRY[klass]
    return None


def has_default(cls: type) -> bool:
    """Return whether ``cls`` has a registered default other than None."""
    return default_for(cls) is not None
