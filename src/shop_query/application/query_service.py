"""Query Service - runs named queries against a catalog and reports them.

The query functions are pure. This service is where their results become
visible: every run is traced, counted, timed and logged, the Python analogue
of printing each result to the console.

Usage:
    from shop_query.application import QueryService

    service = QueryService.from_source(source)
    cheapest = service.run("cheapest_product")
    results = service.run_all()
"""

from __future__ import annotations

import time
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

import structlog

from shop_query.domain.entities import Customer, Order, Product
from shop_query.domain.services import QUERIES, Catalog
from shop_query.domain.value_objects import PriceStatistics
from shop_query.infrastructure.config import QueryConfig
from shop_query.infrastructure.logging import get_logger
from shop_query.infrastructure.metrics import MetricsRegistry, get_metrics
from shop_query.infrastructure.tracing import trace_span
from shop_query.ports.outbound import EntitySource


class UnknownQueryError(KeyError):
    """No query is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown query '{self.name}'"


def result_size(result: Any) -> int:
    """Number of items a query result carries.

    None counts as zero, a single entity or scalar as one, and statistics as
    the number of prices summarized.
    """
    if result is None:
        return 0
    if isinstance(result, PriceStatistics):
        return result.count
    if isinstance(result, (Sequence, Mapping)) and not isinstance(result, str):
        return len(result)
    return 1


def render(result: Any) -> Any:
    """Render a query result into log-friendly primitives."""
    if isinstance(result, (Customer, Order, Product)):
        return str(result)
    if isinstance(result, PriceStatistics):
        return {
            "count": result.count,
            "sum": render(result.total),
            "average": render(result.average),
            "max": render(result.maximum),
            "min": render(result.minimum),
        }
    if isinstance(result, Decimal):
        return str(result)
    if isinstance(result, Mapping):
        return {str(render(k)): render(v) for k, v in result.items()}
    if isinstance(result, (list, tuple)):
        return [render(item) for item in result]
    return result


class QueryService:
    """Runs registered queries over a single catalog snapshot.

    Parameters default to the values in QueryConfig and can be overridden
    per call.
    """

    def __init__(
        self,
        catalog: Catalog,
        config: QueryConfig | None = None,
        metrics: MetricsRegistry | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self._catalog = catalog
        self._config = config or QueryConfig()
        self._metrics = metrics or get_metrics()
        self._logger = (logger or get_logger(__name__)).bind(component="query_service")

        stats = catalog.stats()
        self._metrics.catalog_entities.labels(kind="customer").set(stats.customers)
        self._metrics.catalog_entities.labels(kind="product").set(stats.products)
        self._metrics.catalog_entities.labels(kind="order").set(stats.orders)

    @classmethod
    def from_source(
        cls,
        source: EntitySource,
        config: QueryConfig | None = None,
        metrics: MetricsRegistry | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> QueryService:
        """Snapshot an entity source and build a service over it."""
        return cls(Catalog.from_source(source), config=config, metrics=metrics, logger=logger)

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def query_names(self) -> list[str]:
        return list(QUERIES)

    def run(self, name: str, **overrides: Any) -> Any:
        """Run one query by name.

        Args:
            name: Registered query name
            **overrides: Parameters replacing the configured defaults

        Returns:
            Whatever the query returns

        Raises:
            UnknownQueryError: If ``name`` is not registered
        """
        try:
            query = QUERIES[name]
        except KeyError:
            raise UnknownQueryError(name) from None

        params = self._config.parameters_for(name)
        params.update(overrides)
        if name == "products_ordered_on":
            params.setdefault("on_order", self._report_matched_order)

        log = self._logger.bind(query=name)
        start = time.perf_counter()
        with trace_span(f"query.{name}", {"query.name": name}) as span:
            try:
                result = query(self._catalog, **params)
            except Exception as e:
                self._metrics.queries_total.labels(query=name, status="error").inc()
                span.set_attribute("query.error", type(e).__name__)
                log.error("query_failed", error=str(e), error_type=type(e).__name__)
                raise
            finally:
                self._metrics.query_latency_seconds.labels(query=name).observe(
                    time.perf_counter() - start
                )

            size = result_size(result)
            span.set_attribute("query.result_size", size)

        self._metrics.queries_total.labels(query=name, status="success").inc()
        self._metrics.query_result_size.labels(query=name).set(size)
        log.info("query_completed", result_size=size, result=render(result))
        return result

    def run_all(self) -> dict[str, Any]:
        """Run every registered query with its configured defaults."""
        return {name: self.run(name) for name in QUERIES}

    def _report_matched_order(self, order: Order) -> None:
        self._logger.info("order_matched", order=str(order))
