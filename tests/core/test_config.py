import pytest
from pydantic import ValidationError
from sequtils.core.config import Settings
from sequtils.core.types import default_compare


def test_settings_defaults():
    settings = Settings.load(environ={})
    assert settings.LOG_LEVEL == "WARNING"
    assert "%(levelname)s" in settings.LOG_FORMAT


def test_settings_from_environment():
    settings = Settings.load(
        environ={"LOG_LEVEL": "debug", "LOG_FORMAT": "%(message)s", "OTHER": "x"}
    )
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "%(message)s"


def test_settings_empty_values_fall_back_to_defaults():
    settings = Settings.load(environ={"LOG_LEVEL": ""})
    assert settings.LOG_LEVEL == "WARNING"


def test_settings_rejects_unknown_level():
    with pytest.raises(ValidationError):
        Settings.load(environ={"LOG_LEVEL": "LOUD"})


def test_default_compare():
    assert default_compare(1, 2) == -1
    assert default_compare(2, 2) == 0
    assert default_compare("b", "a") == 1
