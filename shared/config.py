"""
Shared configuration management for the transition engine.
"""

import logging

from pydantic import Field, ValidationError as PydanticValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from shared.errors import ConfigurationError


class EngineConfig(BaseSettings):
    """Settings for processes that embed engines, read from ENGINE_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="ENGINE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    env: str = Field(default="local")
    log_level: str = Field(default="info")
    json_logs: bool = Field(default=True)

    # Observability
    metrics_enabled: bool = Field(default=False)
    metrics_port: int = Field(default=9090, ge=0, le=65535)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        if not isinstance(logging.getLevelName(value.upper()), int):
            raise ValueError(f"unknown log level: {value}")
        return value.lower()


def get_config(**overrides) -> EngineConfig:
    """Build configuration from the environment, applying explicit overrides."""
    try:
        return EngineConfig(**overrides)
    except PydanticValidationError as e:
        raise ConfigurationError(
            "Invalid engine configuration",
            details={"errors": [
                {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                for err in e.errors()
            ]}
        ) from e
