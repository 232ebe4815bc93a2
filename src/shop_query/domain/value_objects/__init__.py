"""Value objects for the shop query domain.

Exports:
    Identifiers:
        - CustomerId, OrderId, ProductId: Type-safe entity identifiers

    Statistics:
        - PriceStatistics: count/sum/average/max/min with explicit empty state
"""

from shop_query.domain.value_objects.identifiers import (
    CustomerId,
    OrderId,
    ProductId,
)
from shop_query.domain.value_objects.statistics import PriceStatistics

__all__ = [
    # Identifiers
    "CustomerId",
    "OrderId",
    "ProductId",
    # Statistics
    "PriceStatistics",
]
