import pytest
from pydantic import ValidationError

from paymaster.config import Settings, get_settings


def test_defaults():
    settings = Settings()
    assert settings.default_employee_age == 30
    assert settings.default_country in {"NA", "ZA"}
    assert settings.file_logging is False


def test_env_parsing(monkeypatch):
    monkeypatch.setenv("PAYROLL_DEFAULT_COUNTRY", " za ")
    monkeypatch.setenv("PAYROLL_FILE_LOGGING", "yes")
    monkeypatch.setenv("DEFAULT_EMPLOYEE_AGE", "45")
    get_settings.cache_clear()
    settings = get_settings()
    assert settings.default_country == "ZA"
    assert settings.file_logging is True
    assert settings.default_employee_age == 45
    get_settings.cache_clear()


def test_age_out_of_range(monkeypatch):
    monkeypatch.setenv("DEFAULT_EMPLOYEE_AGE", "-3")
    with pytest.raises(ValidationError):
        Settings()
