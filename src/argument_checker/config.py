"""Checker configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CheckerSettings(BaseSettings):
    """Configuration for `ArgumentChecker`.

    Loads from environment variables automatically:
        ARGUMENT_CHECKER_STRICT_CAPABILITIES, ARGUMENT_CHECKER_MAX_VALUE_LENGTH

    Attributes
    ----------
    strict_capabilities
        Raise `CapabilityError` when a capability-gated check is applied to a
        value that lacks the capability, instead of skipping the check.
    max_value_length
        Truncate value reprs in error messages to this many characters.
        ``None`` disables truncation.
    """

    strict_capabilities: bool = False
    max_value_length: int | None = Field(default=None, gt=0)

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="ARGUMENT_CHECKER_",
    )


@lru_cache(maxsize=1)
def get_settings() -> CheckerSettings:
    """Return the process-wide settings, loading them on first use."""
    return CheckerSettings()
