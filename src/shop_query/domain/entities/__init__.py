"""Domain entities for the shop query engine.

Entities have identity: two instances with the same id are equal even when
their other attributes differ. All entities are frozen, so queries can share
them freely without risk of mutation.

Exports:
    - Customer: Buyer with a loyalty tier
    - Product: Catalog item with category and price
    - Order: Dated order referencing a customer and products by id
"""

from shop_query.domain.entities.customer import Customer
from shop_query.domain.entities.order import Order
from shop_query.domain.entities.product import Product

__all__ = [
    "Customer",
    "Order",
    "Product",
]
