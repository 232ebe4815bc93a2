"""Configuration management for the shop query service."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class QueryConfig(BaseModel):
    """Default parameters for the named queries."""

    books_category: str = Field(default="Books", description="Category for the price-floor filter")
    books_min_price: Decimal = Field(
        default=Decimal(100), ge=0, description="Exclusive price floor for books"
    )
    baby_category: str = Field(default="Baby", description="Category searched for in orders")
    toys_category: str = Field(default="Toys", description="Category that receives the discount")
    discount_factor: Decimal = Field(
        default=Decimal("0.9"), gt=0, le=1, description="Multiplier applied to discounted prices"
    )
    cheapest_category: str = Field(default="Books", description="Category searched for the cheapest product")
    tier: int = Field(default=2, ge=0, description="Customer tier for the tier window query")
    tier_window_after: date = Field(
        default=date(2021, 2, 1), description="Exclusive lower bound of the tier window"
    )
    tier_window_before: date = Field(
        default=date(2021, 4, 1), description="Exclusive upper bound of the tier window"
    )
    spend_window_start: date = Field(
        default=date(2021, 2, 1), description="Inclusive start of the spend window"
    )
    spend_window_end: date = Field(
        default=date(2021, 2, 28), description="Inclusive end of the spend window"
    )
    report_date: date = Field(
        default=date(2021, 3, 15), description="Exact date for the daily order queries"
    )
    recent_order_limit: int = Field(default=3, ge=0, description="Number of recent orders returned")
    statistics_category: Optional[str] = Field(
        default=None, description="Restrict price statistics to one category (all if unset)"
    )

    @model_validator(mode="after")
    def _check_windows(self) -> QueryConfig:
        if self.tier_window_after >= self.tier_window_before:
            raise ValueError("tier_window_after must precede tier_window_before")
        if self.spend_window_start > self.spend_window_end:
            raise ValueError("spend_window_start must not be after spend_window_end")
        return self

    def parameters_for(self, query: str) -> dict[str, Any]:
        """Keyword arguments for a named query; empty for parameterless queries."""
        parameters: dict[str, dict[str, Any]] = {
            "books_over_price": {
                "category": self.books_category,
                "min_price": self.books_min_price,
            },
            "orders_with_category": {"category": self.baby_category},
            "discounted_products": {
                "category": self.toys_category,
                "factor": self.discount_factor,
            },
            "products_ordered_by_tier": {
                "tier": self.tier,
                "after": self.tier_window_after,
                "before": self.tier_window_before,
            },
            "cheapest_product": {"category": self.cheapest_category},
            "most_recent_orders": {"limit": self.recent_order_limit},
            "products_ordered_on": {"on": self.report_date},
            "total_spent_between": {
                "start": self.spend_window_start,
                "end": self.spend_window_end,
            },
            "average_payment_on": {"on": self.report_date},
            "price_statistics": {"category": self.statistics_category},
        }
        return dict(parameters.get(query, {}))


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="json", description="Log format")
    metrics_enabled: bool = Field(default=False, description="Expose Prometheus metrics over HTTP")
    metrics_port: int = Field(default=8001, ge=1, le=65535, description="Prometheus metrics port")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="shop_query", description="Service name for tracing")
    trace_console_export: bool = Field(
        default=False, description="Also export spans to stdout"
    )


class Config(BaseSettings):
    """Main configuration for the shop query service."""

    model_config = SettingsConfigDict(
        env_prefix="SHOP_QUERY_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    queries: QueryConfig = Field(default_factory=QueryConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
