"""
Configuration management using Pydantic Settings
"""
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from VCARDMAP_* environment variables or .env"""

    model_config = SettingsConfigDict(
        env_prefix="VCARDMAP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level")
    fold_width: int = Field(default=75, ge=10, description="Fold serialized lines at this width")
    max_upload_bytes: int = Field(
        default=5 * 1024 * 1024, ge=1, description="Largest accepted upload"
    )
    default_product_id: str = Field(
        default="-//vcardmap//vcardmap 0.1//EN",
        description="PRODID stamped on uploaded cards that lack one; empty disables",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level


@lru_cache()
def get_settings() -> Settings:
    return Settings()
