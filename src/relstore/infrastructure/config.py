"""Configuration management for the relational store."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="relstore", description="Service name for tracing")


class MetricsConfig(BaseModel):
    """Prometheus metrics configuration."""

    enabled: bool = Field(default=False, description="Serve a Prometheus scrape endpoint")
    port: int = Field(default=8001, ge=1, le=65535, description="Prometheus metrics port")


class Config(BaseSettings):
    """Main configuration for the relational store."""

    model_config = SettingsConfigDict(
        env_prefix="RELSTORE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    metrics: MetricsConfig = Field(default_factory=MetricsConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
