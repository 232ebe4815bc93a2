"""In-memory entity source.

Holds collections that some external loader has already built. The
collections are copied into tuples on construction so later changes to the
caller's lists cannot leak into a running query.
"""

from __future__ import annotations

from typing import Iterable

from shop_query.domain.entities import Customer, Order, Product


class InMemoryEntitySource:
    """Entity source backed by tuples."""

    def __init__(
        self,
        customers: Iterable[Customer] = (),
        products: Iterable[Product] = (),
        orders: Iterable[Order] = (),
    ) -> None:
        self._customers = tuple(customers)
        self._products = tuple(products)
        self._orders = tuple(orders)

    def customers(self) -> tuple[Customer, ...]:
        return self._customers

    def products(self) -> tuple[Product, ...]:
        return self._products

    def orders(self) -> tuple[Order, ...]:
        return self._orders

    def __repr__(self) -> str:
        return (
            f"InMemoryEntitySource(customers={len(self._customers)}, "
            f"products={len(self._products)}, orders={len(self._orders)})"
        )
