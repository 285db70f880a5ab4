import pytest
from pydantic import ValidationError

from argument_checker import CheckerSettings, get_settings


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("ARGUMENT_CHECKER_STRICT_CAPABILITIES", raising=False)
    monkeypatch.delenv("ARGUMENT_CHECKER_MAX_VALUE_LENGTH", raising=False)

    settings = CheckerSettings()

    assert settings.strict_capabilities is False
    assert settings.max_value_length is None


def test_settings_loaded_from_environment(monkeypatch):
    monkeypatch.setenv("ARGUMENT_CHECKER_STRICT_CAPABILITIES", "1")
    monkeypatch.setenv("ARGUMENT_CHECKER_MAX_VALUE_LENGTH", "40")

    settings = CheckerSettings()

    assert settings.strict_capabilities is True
    assert settings.max_value_length == 40


@pytest.mark.parametrize("length", [0, -3])
def test_max_value_length_must_be_positive(length):
    with pytest.raises(ValidationError):
        CheckerSettings(max_value_length=length)


def test_unknown_fields_rejected():
    with pytest.raises(ValidationError):
        CheckerSettings(verbose=True)


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("ARGUMENT_CHECKER_STRICT_CAPABILITIES", "true")

    assert get_settings() is first

    get_settings.cache_clear()
    assert get_settings() is not first
    assert get_settings().strict_capabilities is True
