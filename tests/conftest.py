"""Pytest configuration and fixtures for shop_query tests."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from prometheus_client import CollectorRegistry

from shop_query.adapters.outbound import InMemoryEntitySource
from shop_query.domain.entities import Customer, Order, Product
from shop_query.domain.services import Catalog
from shop_query.domain.value_objects import CustomerId, ProductId
from shop_query.infrastructure.config import QueryConfig
from shop_query.infrastructure.metrics import MetricsRegistry


@pytest.fixture
def customers() -> list[Customer]:
    """Four customers; the tier 3 customer never orders."""
    return [
        Customer(CustomerId(1), "Stefan Walker", 1),
        Customer(CustomerId(2), "Daija Von", 2),
        Customer(CustomerId(3), "Ariane Rodriguez", 2),
        Customer(CustomerId(4), "Marques Nikolaus", 3),
    ]


@pytest.fixture
def products() -> list[Product]:
    return [
        Product(ProductId(1), "omnis quod consequatur", "Games", Decimal("184.83")),
        Product(ProductId(2), "vel libero suscipit", "Toys", Decimal("12.66")),
        Product(ProductId(3), "non nemo iure", "Grocery", Decimal("498.02")),
        Product(ProductId(4), "voluptas ab neque", "Books", Decimal("120.00")),
        Product(ProductId(5), "et necessitatibus", "Baby", Decimal("30.50")),
        Product(ProductId(6), "sed sapiente", "Books", Decimal("90.00")),
        Product(ProductId(7), "cupiditate in", "Toys", Decimal("60.00")),
        Product(ProductId(8), "ut ipsa", "Books", Decimal("150.00")),
    ]


@pytest.fixture
def orders() -> list[Order]:
    """Seven orders spanning Jan-Apr 2021.

    Order 3 repeats product 2; orders 3 and 4 share 15-Mar-2021; order 5
    falls exactly on 01-Apr-2021.
    """
    return [
        Order.create(1, date(2021, 2, 10), 1, [1, 2]),
        Order.create(2, date(2021, 2, 20), 2, [4, 5]),
        Order.create(3, date(2021, 3, 15), 2, [2, 4, 2]),
        Order.create(4, date(2021, 3, 15), 3, [6]),
        Order.create(5, date(2021, 4, 1), 2, [8]),
        Order.create(6, date(2021, 1, 5), 3, [3]),
        Order.create(7, date(2021, 3, 20), 1, [7, 5]),
    ]


@pytest.fixture
def source(
    customers: list[Customer], products: list[Product], orders: list[Order]
) -> InMemoryEntitySource:
    """Provide the sample data behind the entity source port."""
    return InMemoryEntitySource(customers, products, orders)


@pytest.fixture
def catalog(source: InMemoryEntitySource) -> Catalog:
    """Provide a catalog snapshot of the sample data."""
    return Catalog.from_source(source)


@pytest.fixture
def empty_catalog() -> Catalog:
    return Catalog()


@pytest.fixture
def query_config() -> QueryConfig:
    return QueryConfig()


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
