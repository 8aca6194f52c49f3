"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Settings for the demo driver, loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    low_calorie_max: float = Field(default=20.0, ge=0)
    medium_calorie_max: float = Field(default=35.0, ge=0)

    model_config = SettingsConfigDict(
        env_prefix="VEGETABLE_SET_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
