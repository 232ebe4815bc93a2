"""Outbound adapters."""

from shop_query.adapters.outbound.in_memory_source import InMemoryEntitySource

__all__ = [
    "InMemoryEntitySource",
]
