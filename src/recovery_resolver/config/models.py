"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator


class RetryConfig(BaseModel):
    """Configuration for the retry loop that precedes recovery."""

    max_attempts: int = Field(default=3, ge=1)
    base_delay_seconds: float = Field(default=1.0, ge=0)
    max_delay_seconds: float = Field(default=30.0, ge=0)
    exponential_base: float = Field(default=2.0, ge=1)


class ObservabilityConfig(BaseModel):
    """Configuration for structured recovery events."""

    enabled: bool = True
    use_json: bool = True
    log_level: str = Field(default="INFO")
    service_name: str = Field(default="recovery_resolver")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.log_level)


class ResolverConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    retry: RetryConfig = Field(default_factory=RetryConfig)
    observability: ObservabilityConfig = Field(
        default_factory=ObservabilityConfig,
    )
