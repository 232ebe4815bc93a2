"""Outbound ports - contracts for the external data supplier."""

from shop_query.ports.outbound.entity_source import EntitySource

__all__ = [
    "EntitySource",
]
