"""Unit tests for configuration loading."""

from __future__ import annotations

from typing import Generator

import pytest
from pydantic import ValidationError

from relstore.infrastructure.config import Config, MetricsConfig, get_config


@pytest.fixture(autouse=True)
def clear_config_cache() -> Generator[None, None, None]:
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.mark.unit
class TestConfig:
    """Tests for Config defaults and overrides."""

    def test_defaults(self) -> None:
        config = Config()
        assert config.observability.log_level == "INFO"
        assert config.observability.log_format == "json"
        assert config.observability.otel_endpoint is None
        assert config.observability.otel_service_name == "relstore"
        assert config.metrics.enabled is False
        assert config.metrics.port == 8001

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RELSTORE_OBSERVABILITY__LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("RELSTORE_METRICS__PORT", "9100")
        config = Config()
        assert config.observability.log_level == "DEBUG"
        assert config.metrics.port == 9100

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RELSTORE_OBSERVABILITY__LOG_LEVEL", "VERBOSE")
        with pytest.raises(ValidationError):
            Config()

    def test_invalid_port(self) -> None:
        with pytest.raises(ValueError):
            MetricsConfig(port=0)
        with pytest.raises(ValueError):
            MetricsConfig(port=70000)

    def test_get_config_is_cached(self) -> None:
        assert get_config() is get_config()
