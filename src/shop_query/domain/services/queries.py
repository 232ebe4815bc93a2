"""Query engine - pure functional queries over a catalog snapshot.

Each query takes a Catalog plus keyword parameters and returns a derived
sequence, optional entity, scalar or mapping. Queries never mutate the
catalog, never log and never perform I/O; reporting is the caller's job.

Queries:
    books_over_price: category filter with a price floor
    orders_with_category: orders containing a product of a category
    discounted_products: category filter mapped to discounted copies
    products_ordered_by_tier: cross-entity date-window filter with dedup
    cheapest_product: minimum by price within a category
    most_recent_orders: top-N orders by date
    products_ordered_on: exact-date filter with per-order notification
    total_spent_between: inclusive date-range price sum
    average_payment_on: exact-date price mean
    price_statistics: count/sum/average/max/min over product prices
    product_count_by_order: order id -> number of product lines
    orders_by_customer: customer -> orders
    order_totals: order id -> total price
    product_names_by_category: category -> product names
    most_expensive_by_category: category -> priciest product

"No result" and "undefined" outcomes are None, never a zero that could be
mistaken for a real value.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any, Callable, Iterable, Optional

from shop_query.domain.entities import Customer, Order, Product
from shop_query.domain.services.catalog import Catalog
from shop_query.domain.value_objects import OrderId, PriceStatistics


OrderCallback = Callable[[Order], None]


def _flatten(catalog: Catalog, orders: Iterable[Order]) -> list[Product]:
    products: list[Product] = []
    for order in orders:
        products.extend(catalog.products_of(order))
    return products


def _sum_prices(products: Iterable[Product]) -> Decimal:
    return sum((p.price for p in products), Decimal(0))


def books_over_price(
    catalog: Catalog,
    category: str = "Books",
    min_price: Decimal = Decimal(100),
) -> list[Product]:
    """Products whose category is exactly ``category`` and price exceeds ``min_price``."""
    return [
        p for p in catalog.products
        if p.category == category and p.price > min_price
    ]


def orders_with_category(catalog: Catalog, category: str = "Baby") -> list[Order]:
    """Orders holding at least one product of ``category`` (case-insensitive)."""
    return [
        order for order in catalog.orders
        if any(p.in_category(category) for p in catalog.products_of(order))
    ]


def discounted_products(
    catalog: Catalog,
    category: str = "Toys",
    factor: Decimal | float = Decimal("0.9"),
) -> list[Product]:
    """Products of ``category`` as new values with price scaled by ``factor``.

    The catalog's products are not modified. A float or int factor is
    converted to Decimal the same way Product converts prices.
    """
    if not isinstance(factor, Decimal):
        factor = Decimal(str(factor))
    return [
        p.with_price(p.price * factor)
        for p in catalog.products
        if p.in_category(category)
    ]


def products_ordered_by_tier(
    catalog: Catalog,
    tier: int = 2,
    after: date = date(2021, 2, 1),
    before: date = date(2021, 4, 1),
) -> list[Product]:
    """Distinct products ordered by ``tier`` customers strictly between two dates.

    Both bounds are exclusive. Products are deduplicated by identity and
    listed in order of first appearance.
    """
    orders = (
        order for order in catalog.orders
        if catalog.customer_of(order).tier == tier
        and after < order.order_date < before
    )
    # dict keeps first-seen order
    distinct = dict.fromkeys(_flatten(catalog, orders))
    return list(distinct)


def cheapest_product(catalog: Catalog, category: str = "Books") -> Optional[Product]:
    """Lowest-priced product of ``category``, or None if the category is empty.

    Ties go to the product listed first.
    """
    candidates = [p for p in catalog.products if p.in_category(category)]
    return min(candidates, key=lambda p: p.price, default=None)


def most_recent_orders(catalog: Catalog, limit: int = 3) -> list[Order]:
    """The ``limit`` most recently dated orders, newest first.

    Orders sharing a date keep their catalog order.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    # sorted() is stable under reverse=True
    ranked = sorted(catalog.orders, key=lambda o: o.order_date, reverse=True)
    return ranked[:limit]


def products_ordered_on(
    catalog: Catalog,
    on: date = date(2021, 3, 15),
    on_order: Optional[OrderCallback] = None,
) -> list[Product]:
    """Products of every order placed on ``on``, repeats kept.

    ``on_order`` is invoked once for each matching order as it is processed.
    Its return value is ignored.
    """
    products: list[Product] = []
    for order in catalog.orders:
        if order.order_date != on:
            continue
        if on_order is not None:
            on_order(order)
        products.extend(catalog.products_of(order))
    return products


def total_spent_between(
    catalog: Catalog,
    start: date = date(2021, 2, 1),
    end: date = date(2021, 2, 28),
) -> Decimal:
    """Sum of product prices over orders dated within ``start``..``end`` inclusive."""
    orders = (o for o in catalog.orders if start <= o.order_date <= end)
    return _sum_prices(_flatten(catalog, orders))


def average_payment_on(catalog: Catalog, on: date = date(2021, 3, 15)) -> Optional[Decimal]:
    """Mean product price over orders placed on ``on``.

    Returns None when no products qualify; an average of nothing is
    undefined, not zero.
    """
    orders = (o for o in catalog.orders if o.order_date == on)
    products = _flatten(catalog, orders)
    if not products:
        return None
    return _sum_prices(products) / len(products)


def price_statistics(catalog: Catalog, category: Optional[str] = None) -> PriceStatistics:
    """Price statistics over every product, or over one category if given."""
    products: Iterable[Product] = catalog.products
    if category is not None:
        products = (p for p in products if p.in_category(category))
    return PriceStatistics.of(p.price for p in products)


def product_count_by_order(catalog: Catalog) -> dict[OrderId, int]:
    """Order id to the number of product lines on the order."""
    return {order.order_id: order.product_count for order in catalog.orders}


def orders_by_customer(catalog: Catalog) -> dict[Customer, list[Order]]:
    """Orders grouped by the customer who placed them.

    Customers without orders do not appear.
    """
    groups: dict[Customer, list[Order]] = {}
    for order in catalog.orders:
        groups.setdefault(catalog.customer_of(order), []).append(order)
    return groups


def order_totals(catalog: Catalog) -> dict[OrderId, Decimal]:
    """Order id to the summed price of its products."""
    return {
        order.order_id: _sum_prices(catalog.products_of(order))
        for order in catalog.orders
    }


def product_names_by_category(catalog: Catalog) -> dict[str, list[str]]:
    """Category (exact label) to product names in catalog order."""
    names: dict[str, list[str]] = {}
    for p in catalog.products:
        names.setdefault(p.category, []).append(p.name)
    return names


def most_expensive_by_category(catalog: Catalog) -> dict[str, Product]:
    """Category to its highest-priced product; ties go to the first listed."""
    best: dict[str, Product] = {}
    for p in catalog.products:
        current = best.get(p.category)
        if current is None or p.price > current.price:
            best[p.category] = p
    return best


QueryFunction = Callable[..., Any]

QUERIES: dict[str, QueryFunction] = {
    "books_over_price": books_over_price,
    "orders_with_category": orders_with_category,
    "discounted_products": discounted_products,
    "products_ordered_by_tier": products_ordered_by_tier,
    "cheapest_product": cheapest_product,
    "most_recent_orders": most_recent_orders,
    "products_ordered_on": products_ordered_on,
    "total_spent_between": total_spent_between,
    "average_payment_on": average_payment_on,
    "price_statistics": price_statistics,
    "product_count_by_order": product_count_by_order,
    "orders_by_customer": orders_by_customer,
    "order_totals": order_totals,
    "product_names_by_category": product_names_by_category,
    "most_expensive_by_category": most_expensive_by_category,
}
"""Registry of query name to query function, in exercise order."""
