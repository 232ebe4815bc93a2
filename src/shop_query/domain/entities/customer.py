"""Customer entity."""

from __future__ import annotations

from dataclasses import dataclass, field

from shop_query.domain.value_objects import CustomerId


@dataclass(frozen=True, slots=True)
class Customer:
    """A customer with a loyalty tier.

    Equality and hashing use ``customer_id`` only, so a customer can key a
    grouping even if two loads produced separate instances.
    """

    customer_id: CustomerId
    name: str = field(compare=False)
    tier: int = field(compare=False)

    def __post_init__(self) -> None:
        if self.tier < 0:
            raise ValueError(f"tier must be non-negative, got {self.tier}")

    def __str__(self) -> str:
        return f"Customer({self.customer_id}, {self.name!r}, tier={self.tier})"
