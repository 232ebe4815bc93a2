"""Infrastructure layer - cross-cutting concerns."""

from shop_query.infrastructure.config import Config, ObservabilityConfig, QueryConfig, get_config
from shop_query.infrastructure.logging import setup_logging, get_logger
from shop_query.infrastructure.metrics import setup_metrics, get_metrics, MetricsRegistry
from shop_query.infrastructure.tracing import setup_tracing, get_tracer, trace_span

__all__ = [
    "Config",
    "ObservabilityConfig",
    "QueryConfig",
    "get_config",
    "setup_logging",
    "get_logger",
    "setup_metrics",
    "get_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "get_tracer",
    "trace_span",
]
