"""Entity Source port.

The query engine never loads data itself. An entity source hands over the
three collections, fully materialized, before any query runs. Whether they
came from a relational store, a file or a test fixture is not the engine's
concern.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from shop_query.domain.entities import Customer, Order, Product


@runtime_checkable
class EntitySource(Protocol):
    """Supplier of already-loaded customers, products and orders."""

    def customers(self) -> Sequence[Customer]:
        """Return every customer."""
        ...

    def products(self) -> Sequence[Product]:
        """Return every product."""
        ...

    def orders(self) -> Sequence[Order]:
        """Return every order."""
        ...
