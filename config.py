"""
Image Gateway configuration.

Settings are read from environment variables prefixed with GATEWAY_, using
"__" between nested groups (GATEWAY_SYSTEM__LOG_LEVEL=DEBUG), and from an
optional .env file.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.constants import ImageConstants


class SystemSettings(BaseModel):
    """Process-level settings"""

    log_level: str = "INFO"
    debug: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


class APISettings(BaseModel):
    """HTTP server settings"""

    host: str = "0.0.0.0"
    port: int = Field(8088, ge=1, le=65535)
    cors_enabled: bool = True
    cors_origins: List[str] = ["*"]


class ImageSettings(BaseModel):
    """Uploaded image limits"""

    max_upload_mb: int = Field(
        ImageConstants.DEFAULT_MAX_UPLOAD_MB,
        ge=ImageConstants.MIN_UPLOAD_MB,
        le=ImageConstants.MAX_UPLOAD_MB,
    )

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="GATEWAY_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    environment: str = "development"
    system: SystemSettings = SystemSettings()
    api: APISettings = APISettings()
    image: ImageSettings = ImageSettings()

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict representation, stored on app.state.config"""
        return self.model_dump()


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance"""
    return Settings()
