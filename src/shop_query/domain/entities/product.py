"""Product entity.

Products are immutable. A price change (e.g. a discount) produces a new
Product carrying the same identity, leaving the original untouched.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from decimal import Decimal

from shop_query.domain.value_objects import ProductId


@dataclass(frozen=True, slots=True)
class Product:
    """A catalog product.

    Attributes:
        product_id: Identity; the only field used for equality and hashing
        name: Display name
        category: Category label such as "Books" or "Toys"
        price: Non-negative unit price

    Example:
        >>> book = Product(ProductId(1), "Dune", "Books", Decimal("120"))
        >>> cheaper = book.with_price(Decimal("100"))
        >>> cheaper == book, cheaper.price, book.price
        (True, Decimal('100'), Decimal('120'))
    """

    product_id: ProductId
    name: str = field(compare=False)
    category: str = field(compare=False)
    price: Decimal = field(compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.price, Decimal):
            object.__setattr__(self, "price", Decimal(str(self.price)))
        if not self.price.is_finite():
            raise ValueError(f"price must be finite, got {self.price}")
        if self.price < 0:
            raise ValueError(f"price must be non-negative, got {self.price}")

    def in_category(self, category: str) -> bool:
        """Case-insensitive category match."""
        return self.category.casefold() == category.casefold()

    def with_price(self, price: Decimal) -> Product:
        """Return a copy of this product with a different price."""
        return dataclasses.replace(self, price=price)

    def __str__(self) -> str:
        return f"Product({self.product_id}, {self.name!r}, {self.category}, {self.price})"
