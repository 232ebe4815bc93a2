"""Dependency injection container for the shop query service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

import structlog
from opentelemetry import trace

from shop_query.infrastructure.config import Config, get_config
from shop_query.infrastructure.logging import get_logger, setup_logging
from shop_query.infrastructure.metrics import MetricsRegistry, get_metrics, setup_metrics
from shop_query.infrastructure.tracing import setup_tracing

if TYPE_CHECKING:
    from shop_query.application.query_service import QueryService
    from shop_query.ports.outbound import EntitySource


@dataclass
class Container:
    """Bundle of the ambient services a QueryService needs."""

    config: Config
    logger: structlog.BoundLogger
    tracer: trace.Tracer
    metrics: MetricsRegistry

    _instance: ClassVar[Container | None] = None

    @classmethod
    def create(cls, config: Config | None = None) -> Container:
        """Create and initialize the container with all dependencies.

        The first call wins: once an instance exists, ``config`` is ignored
        and the existing container is returned. Call ``reset()`` first to
        rebuild it with different settings.
        """
        if cls._instance is not None:
            return cls._instance

        config = config or get_config()
        obs = config.observability

        setup_logging(
            level=obs.log_level,
            log_format=obs.log_format,
            service_name=obs.otel_service_name,
        )
        logger = get_logger("shop_query")
        tracer = setup_tracing(
            service_name=obs.otel_service_name,
            otlp_endpoint=obs.otel_endpoint,
            console_export=obs.trace_console_export,
        )
        metrics = setup_metrics(obs.metrics_port) if obs.metrics_enabled else get_metrics()

        cls._instance = cls(
            config=config,
            logger=logger,
            tracer=tracer,
            metrics=metrics,
        )

        logger.info(
            "shop_query_container_initialized",
            log_format=obs.log_format,
            metrics_enabled=obs.metrics_enabled,
            tracing_endpoint=obs.otel_endpoint,
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

    def query_service(self, source: EntitySource) -> QueryService:
        """Build a QueryService over a snapshot of ``source``."""
        from shop_query.application.query_service import QueryService

        return QueryService.from_source(
            source,
            config=self.config.queries,
            metrics=self.metrics,
            logger=self.logger,
        )


def get_container() -> Container:
    """Get the dependency injection container."""
    return Container.get()
