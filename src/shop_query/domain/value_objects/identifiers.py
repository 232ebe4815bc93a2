"""Identity types for the shop entities.

Orders refer to customers and products by these identifiers rather than by
shared object references, so every cross-entity hop goes through a catalog
lookup.
"""

from __future__ import annotations

from typing import NewType


CustomerId = NewType("CustomerId", int)
"""Unique identifier for a customer."""

OrderId = NewType("OrderId", int)
"""Unique identifier for an order."""

ProductId = NewType("ProductId", int)
"""Unique identifier for a product."""
