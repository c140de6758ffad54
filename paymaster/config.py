from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_BOOL_TRUE = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in ENV_BOOL_TRUE


class Settings(BaseModel):
    build_version: str = Field(default_factory=lambda: os.getenv("BUILD_VERSION", "dev"))
    build_sha: str = Field(default_factory=lambda: os.getenv("BUILD_SHA", "local"))
    default_employee_age: int = Field(default_factory=lambda: int(os.getenv("DEFAULT_EMPLOYEE_AGE", "30")))
    default_country: str = Field(default_factory=lambda: os.getenv("PAYROLL_DEFAULT_COUNTRY", "NA"))
    file_logging: bool = Field(default_factory=lambda: _env_bool("PAYROLL_FILE_LOGGING", False))
    log_dir: str = Field(default_factory=lambda: os.getenv("PAYROLL_LOG_DIR", "logs"))

    model_config = ConfigDict(frozen=True, validate_default=True)

    @field_validator("default_employee_age")
    @classmethod
    def _validate_age(cls, value: int) -> int:
        if not 0 <= value <= 130:
            raise ValueError(f"DEFAULT_EMPLOYEE_AGE must be between 0 and 130, got {value}")
        return value

    @field_validator("default_country")
    @classmethod
    def _normalize_country(cls, value: str) -> str:
        return (value or "NA").strip().upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
