"""Unit tests for PriceStatistics."""

from __future__ import annotations

from decimal import Decimal

import pytest

from shop_query.domain.value_objects import PriceStatistics


@pytest.mark.unit
class TestPriceStatistics:
    """Tests for PriceStatistics."""

    def test_of_prices(self) -> None:
        stats = PriceStatistics.of([Decimal("10"), Decimal("30"), Decimal("20")])

        assert stats.count == 3
        assert stats.total == Decimal("60")
        assert stats.average == Decimal("20")
        assert stats.maximum == Decimal("30")
        assert stats.minimum == Decimal("10")
        assert not stats.is_empty

    def test_single_price(self) -> None:
        stats = PriceStatistics.of([Decimal("7.5")])
        assert stats.total == stats.average == stats.maximum == stats.minimum == Decimal("7.5")

    def test_empty_is_undefined_not_zero(self) -> None:
        """An empty series has count 0 and no other aggregate."""
        stats = PriceStatistics.of([])

        assert stats.count == 0
        assert stats.is_empty
        assert stats.total is None
        assert stats.average is None
        assert stats.maximum is None
        assert stats.minimum is None
        assert stats == PriceStatistics.empty()

    def test_accepts_generator(self) -> None:
        stats = PriceStatistics.of(Decimal(n) for n in range(1, 5))
        assert stats.count == 4
        assert stats.total == Decimal(10)

    def test_zero_prices_are_defined(self) -> None:
        """All-zero prices give zero aggregates, distinct from the empty case."""
        stats = PriceStatistics.of([Decimal(0), Decimal(0)])
        assert stats.total == Decimal(0)
        assert stats.minimum == Decimal(0)
        assert stats != PriceStatistics.empty()

    def test_empty_with_values_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            PriceStatistics(count=0, total=Decimal(0))

    def test_partial_values_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            PriceStatistics(count=2, total=Decimal(3))

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            PriceStatistics(count=-1)

    def test_immutability(self) -> None:
        stats = PriceStatistics.empty()
        with pytest.raises(AttributeError):
            stats.count = 1  # type: ignore[misc]
