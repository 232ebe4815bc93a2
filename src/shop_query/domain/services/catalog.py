"""Catalog - a read-only snapshot of customers, products and orders.

The catalog indexes each collection by identity so that an order's customer
and product references can be resolved with a dictionary lookup. It owns no
entities: it only borrows the collections handed to it and never changes
them.

A reference that cannot be resolved is a data-integrity fault in whatever
loaded the data. The catalog reports it by raising DanglingReferenceError and
makes no attempt to repair it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Hashable, Iterable, Sequence, TypeVar

from shop_query.domain.entities import Customer, Order, Product
from shop_query.domain.value_objects import CustomerId, ProductId

if TYPE_CHECKING:
    from shop_query.ports.outbound import EntitySource


E = TypeVar("E")


class CatalogIntegrityError(Exception):
    """The supplied collections violate a referential invariant."""
    pass


class DanglingReferenceError(CatalogIntegrityError):
    """An order refers to a customer or product that was not supplied."""

    def __init__(self, kind: str, entity_id: int, order_id: int | None = None) -> None:
        self.kind = kind
        self.entity_id = entity_id
        self.order_id = order_id
        where = f" (referenced by order {order_id})" if order_id is not None else ""
        super().__init__(f"Unknown {kind} {entity_id}{where}")


class DuplicateIdentityError(CatalogIntegrityError):
    """Two entities of the same kind share an identity."""

    def __init__(self, kind: str, entity_id: int) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"Duplicate {kind} id {entity_id}")


@dataclass(frozen=True)
class CatalogStats:
    """Collection sizes of a catalog snapshot."""

    customers: int
    products: int
    orders: int


def _index(kind: str, entities: Sequence[E], key_attr: str) -> dict[Hashable, E]:
    index: dict[Hashable, E] = {}
    for entity in entities:
        key = getattr(entity, key_attr)
        if key in index:
            raise DuplicateIdentityError(kind, key)
        index[key] = entity
    return index


class Catalog:
    """Immutable view over the three entity collections.

    Example:
        >>> catalog = Catalog(customers, products, orders)
        >>> catalog.customer_of(catalog.orders[0]).name
        'Alice'
    """

    def __init__(
        self,
        customers: Iterable[Customer] = (),
        products: Iterable[Product] = (),
        orders: Iterable[Order] = (),
    ) -> None:
        self._customers = tuple(customers)
        self._products = tuple(products)
        self._orders = tuple(orders)

        self._customers_by_id: dict[Hashable, Customer] = _index(
            "customer", self._customers, "customer_id"
        )
        self._products_by_id: dict[Hashable, Product] = _index(
            "product", self._products, "product_id"
        )
        _index("order", self._orders, "order_id")

    @classmethod
    def from_source(cls, source: EntitySource) -> Catalog:
        """Take a snapshot of an entity source."""
        return cls(
            customers=source.customers(),
            products=source.products(),
            orders=source.orders(),
        )

    @property
    def customers(self) -> tuple[Customer, ...]:
        return self._customers

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    @property
    def orders(self) -> tuple[Order, ...]:
        return self._orders

    def customer(self, customer_id: CustomerId) -> Customer:
        """Look up a customer by id.

        Raises:
            DanglingReferenceError: If no such customer was supplied
        """
        try:
            return self._customers_by_id[customer_id]
        except KeyError:
            raise DanglingReferenceError("customer", customer_id) from None

    def product(self, product_id: ProductId) -> Product:
        """Look up a product by id.

        Raises:
            DanglingReferenceError: If no such product was supplied
        """
        try:
            return self._products_by_id[product_id]
        except KeyError:
            raise DanglingReferenceError("product", product_id) from None

    def customer_of(self, order: Order) -> Customer:
        """Resolve the customer who placed an order."""
        try:
            return self._customers_by_id[order.customer_id]
        except KeyError:
            raise DanglingReferenceError(
                "customer", order.customer_id, order.order_id
            ) from None

    def products_of(self, order: Order) -> list[Product]:
        """Resolve an order's products in list order, repeats included."""
        products = []
        for product_id in order.product_ids:
            try:
                products.append(self._products_by_id[product_id])
            except KeyError:
                raise DanglingReferenceError(
                    "product", product_id, order.order_id
                ) from None
        return products

    def validate(self) -> None:
        """Check every order reference up front.

        Raises:
            DanglingReferenceError: For the first unresolved reference found
        """
        for order in self._orders:
            self.customer_of(order)
            self.products_of(order)

    def stats(self) -> CatalogStats:
        return CatalogStats(
            customers=len(self._customers),
            products=len(self._products),
            orders=len(self._orders),
        )

    def __repr__(self) -> str:
        s = self.stats()
        return f"Catalog(customers={s.customers}, products={s.products}, orders={s.orders})"
