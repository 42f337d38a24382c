"""
Runtime settings for the package procedures.

Values come from the environment (prefix ``GARBAGEMAN_``) or a ``.env`` file so
the same bundle runs against a real host and in tests.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..__version__ import __package_version__
from .constants import DEFAULT_HEALTH_TIMEOUT_SECONDS


class EmbassySettings(BaseSettings):
    """Settings consumed by the procedure surface."""

    model_config = SettingsConfigDict(
        env_prefix="GARBAGEMAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Internal hostname the host assigns to the service container
    service_host: str = Field(default="garbageman-nm.embassy")

    # Version of the package currently installed; the migration target
    package_version: str = Field(default=__package_version__)

    health_timeout_seconds: float = Field(default=DEFAULT_HEALTH_TIMEOUT_SECONDS, gt=0)

    # Where the persisted state lives; in-memory when unset
    config_path: Optional[str] = Field(default=None)

    password_length: int = Field(default=16, ge=8, le=128)


@lru_cache()
def get_settings() -> EmbassySettings:
    """Get cached settings instance."""
    return EmbassySettings()
