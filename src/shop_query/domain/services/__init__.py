"""Domain services - the catalog snapshot and the query engine."""

from shop_query.domain.services.catalog import (
    Catalog,
    CatalogIntegrityError,
    CatalogStats,
    DanglingReferenceError,
    DuplicateIdentityError,
)
from shop_query.domain.services.queries import (
    QUERIES,
    average_payment_on,
    books_over_price,
    cheapest_product,
    discounted_products,
    most_expensive_by_category,
    most_recent_orders,
    order_totals,
    orders_by_customer,
    orders_with_category,
    price_statistics,
    product_count_by_order,
    product_names_by_category,
    products_ordered_by_tier,
    products_ordered_on,
    total_spent_between,
)

__all__ = [
    # Catalog
    "Catalog",
    "CatalogIntegrityError",
    "CatalogStats",
    "DanglingReferenceError",
    "DuplicateIdentityError",
    # Queries
    "QUERIES",
    "books_over_price",
    "orders_with_category",
    "discounted_products",
    "products_ordered_by_tier",
    "cheapest_product",
    "most_recent_orders",
    "products_ordered_on",
    "total_spent_between",
    "average_payment_on",
    "price_statistics",
    "product_count_by_order",
    "orders_by_customer",
    "order_totals",
    "product_names_by_category",
    "most_expensive_by_category",
]
