"""Unit tests for configuration module."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from shop_query.infrastructure.config import (
    Config,
    ObservabilityConfig,
    QueryConfig,
    get_config,
)


@pytest.mark.unit
class TestConfig:
    """Tests for Config class."""

    def test_default_config(self) -> None:
        """Test default configuration values."""
        config = Config()

        assert config.queries.books_category == "Books"
        assert config.queries.books_min_price == Decimal(100)
        assert config.queries.discount_factor == Decimal("0.9")
        assert config.queries.tier == 2
        assert config.queries.report_date == date(2021, 3, 15)
        assert config.queries.recent_order_limit == 3
        assert config.observability.log_format == "json"
        assert config.observability.metrics_enabled is False

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Nested fields can be set from the environment."""
        monkeypatch.setenv("SHOP_QUERY_QUERIES__TIER", "3")
        monkeypatch.setenv("SHOP_QUERY_QUERIES__REPORT_DATE", "2021-04-02")
        monkeypatch.setenv("SHOP_QUERY_OBSERVABILITY__LOG_LEVEL", "DEBUG")

        config = Config()

        assert config.queries.tier == 3
        assert config.queries.report_date == date(2021, 4, 2)
        assert config.observability.log_level == "DEBUG"

    def test_invalid_discount_factor(self) -> None:
        """A factor above 1 would be a surcharge."""
        with pytest.raises(ValidationError):
            QueryConfig(discount_factor=Decimal("1.5"))

    def test_negative_tier_rejected(self) -> None:
        with pytest.raises(ValidationError):
            QueryConfig(tier=-1)

    def test_tier_window_must_be_ordered(self) -> None:
        with pytest.raises(ValidationError, match="tier_window_after"):
            QueryConfig(
                tier_window_after=date(2021, 4, 1),
                tier_window_before=date(2021, 2, 1),
            )

    def test_single_day_spend_window_allowed(self) -> None:
        config = QueryConfig(
            spend_window_start=date(2021, 2, 1),
            spend_window_end=date(2021, 2, 1),
        )
        assert config.spend_window_start == config.spend_window_end

    def test_spend_window_must_be_ordered(self) -> None:
        with pytest.raises(ValidationError, match="spend_window_start"):
            QueryConfig(
                spend_window_start=date(2021, 3, 1),
                spend_window_end=date(2021, 2, 1),
            )

    def test_invalid_log_format(self) -> None:
        with pytest.raises(ValidationError):
            ObservabilityConfig(log_format="xml")  # type: ignore[arg-type]


@pytest.mark.unit
class TestQueryParameters:
    """Tests for QueryConfig.parameters_for."""

    def test_books_over_price(self, query_config: QueryConfig) -> None:
        assert query_config.parameters_for("books_over_price") == {
            "category": "Books",
            "min_price": Decimal(100),
        }

    def test_tier_window(self, query_config: QueryConfig) -> None:
        assert query_config.parameters_for("products_ordered_by_tier") == {
            "tier": 2,
            "after": date(2021, 2, 1),
            "before": date(2021, 4, 1),
        }

    def test_parameterless_query(self, query_config: QueryConfig) -> None:
        assert query_config.parameters_for("order_totals") == {}

    def test_returns_fresh_dict(self, query_config: QueryConfig) -> None:
        params = query_config.parameters_for("cheapest_product")
        params["category"] = "Toys"
        assert query_config.parameters_for("cheapest_product") == {"category": "Books"}


@pytest.mark.unit
class TestConfigSingleton:
    """Tests for get_config singleton."""

    def test_get_config_returns_same_instance(self) -> None:
        config1 = get_config()
        config2 = get_config()
        assert config1 is config2
