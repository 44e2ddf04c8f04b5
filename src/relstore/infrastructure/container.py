"""Dependency injection container for the relational store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import structlog
from opentelemetry import trace

from relstore.infrastructure.config import Config, get_config
from relstore.infrastructure.logging import setup_logging
from relstore.infrastructure.metrics import MetricsRegistry, get_metrics, setup_metrics
from relstore.infrastructure.tracing import get_tracer, setup_tracing
from relstore.ports.outbound import TableObserver


@dataclass
class Container:
    """Bundles the ambient services shared by all relstore components."""

    config: Config
    logger: structlog.BoundLogger
    tracer: trace.Tracer
    metrics: MetricsRegistry
    observer: TableObserver

    _instance: ClassVar[Container | None] = None

    @classmethod
    def create(cls, config: Config | None = None) -> Container:
        """Create and initialize the container with all dependencies.

        Args:
            config: Configuration to use. Defaults to get_config().
        """
        if cls._instance is not None:
            return cls._instance

        from relstore.adapters.outbound import TelemetryObserver

        config = config or get_config()
        observability = config.observability

        logger = setup_logging(
            observability.log_level,
            observability.log_format,
            service_name=observability.otel_service_name,
        )

        if observability.otel_endpoint:
            tracer = setup_tracing(observability)
        else:
            tracer = get_tracer()

        if config.metrics.enabled:
            metrics = setup_metrics(port=config.metrics.port)
        else:
            metrics = get_metrics()

        cls._instance = cls(
            config=config,
            logger=logger,
            tracer=tracer,
            metrics=metrics,
            observer=TelemetryObserver(metrics=metrics, logger=logger),
        )

        logger.info(
            "relstore_container_initialized",
            log_level=observability.log_level,
            tracing=observability.otel_endpoint is not None,
            metrics_enabled=config.metrics.enabled,
        )

        return cls._instance

    @classmethod
    def get(cls) -> Container:
        """Get the singleton container instance."""
        if cls._instance is None:
            return cls.create()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the container (useful for testing)."""
        cls._instance = None


def get_container() -> Container:
    """Get the dependency injection container."""
    return Container.get()
