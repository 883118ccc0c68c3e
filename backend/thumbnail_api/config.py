# backend/thumbnail_api/config.py
from typing import List, Union

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    DEFAULT_PROCESSING_WORKERS,
    DEFAULT_THUMBNAIL_QUALITY,
    MAX_DIMENSION,
    MAX_FILE_SIZE_BYTES,
    MAX_THUMBNAIL_QUALITY,
    MAX_THUMBNAIL_SIZES,
    MIN_DIMENSION,
    MIN_THUMBNAIL_QUALITY,
)
from .enums import LogLevel, ResizeMode


class Settings(BaseSettings):
    environment: str = "development"

    # API
    api_host: str = Field(default="0.0.0.0", description="API host to bind to")
    api_port: int = Field(
        default=8080, ge=1, le=65535, description="API port to bind to"
    )
    api_reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    # CORS - use Union to handle both string and list inputs
    # Can be set via CORS_ORIGINS env var as comma-separated string.
    # Empty means no cross-origin requests are permitted.
    cors_origins: Union[str, List[str]] = Field(
        default="",
        description="Allowed CORS origins. Can be comma-separated string.",
    )

    @property
    def cors_origins_list(self) -> List[str]:
        """Convert cors_origins to a list of non-blank origin strings"""
        if isinstance(self.cors_origins, str):
            origins = self.cors_origins.split(",")
        else:
            origins = self.cors_origins
        return [origin.strip() for origin in origins if origin and origin.strip()]

    # Upload intake
    max_file_size_bytes: int = Field(
        default=MAX_FILE_SIZE_BYTES,
        ge=1,
        description="Largest accepted upload in bytes",
    )
    min_dimension: int = Field(
        default=MIN_DIMENSION, ge=1, description="Smallest thumbnail edge in pixels"
    )
    max_dimension: int = Field(
        default=MAX_DIMENSION, ge=1, description="Largest thumbnail edge in pixels"
    )
    max_thumbnail_sizes: int = Field(
        default=MAX_THUMBNAIL_SIZES,
        ge=1,
        le=100,
        description="Maximum number of sizes accepted in one request",
    )
    thumbnail_quality: int = Field(
        default=DEFAULT_THUMBNAIL_QUALITY,
        ge=MIN_THUMBNAIL_QUALITY,
        le=MAX_THUMBNAIL_QUALITY,
        description="Encoder quality for lossy formats (JPEG, WEBP)",
    )
    resize_mode: ResizeMode = Field(
        default=ResizeMode.STRETCH,
        description="stretch: exact non-uniform scale; fit: letterboxed on exact canvas",
    )

    # Worker settings
    processing_workers: int = Field(
        default=DEFAULT_PROCESSING_WORKERS,
        ge=1,
        le=100,
        description="Size of the bounded thumbnail processing pool",
    )

    # Logging
    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_file: Union[str, None] = Field(
        default=None, description="Log file path (optional)"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v) -> LogLevel:
        """Validate log level is one of the allowed values"""
        if isinstance(v, LogLevel):
            return v
        allowed_levels = LogLevel.__members__.keys()
        v_upper = str(v).upper()
        if v_upper not in allowed_levels:
            raise ValueError(
                f"Invalid log level '{v}'. Must be one of: {', '.join(allowed_levels)}"
            )
        return LogLevel[v_upper]

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is one of the allowed values"""
        allowed_envs = ["development", "staging", "production"]
        v_lower = v.lower()
        if v_lower not in allowed_envs:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {', '.join(allowed_envs)}"
            )
        return v_lower

    @model_validator(mode="after")
    def validate_dimension_bounds(self) -> "Settings":
        if self.min_dimension > self.max_dimension:
            raise ValueError(
                f"min_dimension ({self.min_dimension}) must not exceed "
                f"max_dimension ({self.max_dimension})"
            )
        return self

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


# Global settings instance
settings = Settings()
