"""Order entity.

An order references its customer and products by identity. The product list
is ordered and may repeat a product; queries that flatten orders keep those
repeats unless they deduplicate explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from shop_query.domain.value_objects import CustomerId, OrderId, ProductId


@dataclass(frozen=True, slots=True)
class Order:
    """A customer order placed on a calendar date."""

    order_id: OrderId
    order_date: date = field(compare=False)
    customer_id: CustomerId = field(compare=False)
    product_ids: tuple[ProductId, ...] = field(default=(), compare=False)
    status: str = field(default="NEW", compare=False)
    delivery_date: Optional[date] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        # Accept any iterable but store an immutable tuple
        if not isinstance(self.product_ids, tuple):
            object.__setattr__(self, "product_ids", tuple(self.product_ids))
        if self.delivery_date is not None and self.delivery_date < self.order_date:
            raise ValueError(
                f"delivery_date {self.delivery_date} precedes order_date {self.order_date}"
            )

    @classmethod
    def create(
        cls,
        order_id: int,
        order_date: date,
        customer_id: int,
        product_ids: Iterable[int] = (),
        **kwargs: object,
    ) -> Order:
        """Build an order from plain integer identifiers."""
        return cls(
            order_id=OrderId(order_id),
            order_date=order_date,
            customer_id=CustomerId(customer_id),
            product_ids=tuple(ProductId(pid) for pid in product_ids),
            **kwargs,  # type: ignore[arg-type]
        )

    @property
    def product_count(self) -> int:
        """Number of product lines, repeats included."""
        return len(self.product_ids)

    def __str__(self) -> str:
        return (
            f"Order({self.order_id}, {self.order_date.isoformat()}, "
            f"customer={self.customer_id}, products={list(self.product_ids)})"
        )
