"""
Centralized Configuration for the i18n resolver

Type-safe settings using Pydantic Settings:
- Environment variable binding (I18N_ prefix) with defaults
- Optional .env file support
- Test-friendly reload
"""

import os
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from i18n_resolver.utils.language import normalize_language


class I18nSettings(BaseSettings):
    """Translation dictionary settings"""

    model_config = SettingsConfigDict(
        env_prefix="I18N_",
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    dict_file: Optional[str] = Field(
        default=None,
        description="Path to the JSON translations dictionary (key -> language -> text)"
    )
    default_language: str = Field(
        default="en",
        description="Language used when a request does not ask for one"
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for translation diagnostics"
    )

    @field_validator("dict_file", mode="before")
    @classmethod
    def blank_dict_file_is_unset(cls, v):
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator("default_language", mode="before")
    @classmethod
    def normalize_default_language(cls, v):
        return normalize_language(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return str(v or "INFO").strip().upper()


class ServiceSettings(BaseSettings):
    """HTTP host settings"""

    model_config = SettingsConfigDict(
        env_prefix="I18N_SERVICE_",
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    host: str = Field(default="localhost", description="Bind host")
    port: int = Field(default=8080, description="Bind port")
    reload: bool = Field(default=False, description="Enable uvicorn auto-reload")


class ApplicationSettings(BaseSettings):
    """Main application settings - aggregates all other settings"""

    model_config = SettingsConfigDict(
        env_file=".env" if not os.getenv("DOCKER_CONTAINER") else None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    i18n: I18nSettings = Field(default_factory=I18nSettings)
    service: ServiceSettings = Field(default_factory=ServiceSettings)


settings = ApplicationSettings()


def get_settings() -> ApplicationSettings:
    """
    Get the global settings instance

    Can be used with FastAPI's Depends() for dependency injection.
    """
    return settings


def reload_settings() -> ApplicationSettings:
    """
    Reload settings from environment (useful for testing)
    """
    global settings
    settings = ApplicationSettings()
    return settings
