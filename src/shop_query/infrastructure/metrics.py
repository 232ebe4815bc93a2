"""Prometheus metrics for the shop query service."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all shop query metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        self.queries_total = Counter(
            "shop_queries_total",
            "Total number of queries executed",
            ["query", "status"],  # status: success, error
            registry=self._registry,
        )

        self.query_latency_seconds = Histogram(
            "shop_query_latency_seconds",
            "Query latency in seconds",
            ["query"],
            buckets=(0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
            registry=self._registry,
        )

        self.query_result_size = Gauge(
            "shop_query_result_size",
            "Number of items in the last result of a query",
            ["query"],
            registry=self._registry,
        )

        self.catalog_entities = Gauge(
            "shop_catalog_entities",
            "Entities in the loaded catalog snapshot",
            ["kind"],  # customer, product, order
            registry=self._registry,
        )

        self.info = Info(
            "shop_query",
            "Shop query service information",
            registry=self._registry,
        )

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry


# Global metrics registry
_metrics: MetricsRegistry | None = None
_server_started = False


def setup_metrics(port: int = 8001, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up Prometheus metrics server.

    Metrics can only be registered once per collector registry, so a global
    MetricsRegistry already bound to the same registry is reused, and the
    HTTP server is started at most once per process.

    Args:
        port: Port for the metrics HTTP server
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics, _server_started
    target = registry or REGISTRY
    if _metrics is None or _metrics.registry is not target:
        _metrics = MetricsRegistry(target)

    from shop_query import __version__
    _metrics.info.info({
        "version": __version__,
    })

    if not _server_started:
        start_http_server(port, registry=target)
        _server_started = True

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
