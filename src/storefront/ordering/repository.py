"""Repository for the Order aggregate."""

from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.ordering.order import Order, OrderItem

SORTABLE_FIELDS = {"total": "total", "createdAt": "created_at"}


@storefront.repository(part_of=Order)
class OrderRepository:
    def page(self, user_id=None, sort_by="createdAt", sort_order="desc", offset=0, limit=10):
        """One page of orders, optionally restricted to a single owner."""
        field = SORTABLE_FIELDS[sort_by]
        query = self._dao.query
        if user_id is not None:
            query = query.filter(user_id=user_id)

        return (
            query.order_by(f"-{field}" if sort_order == "desc" else field)
            .offset(offset)
            .limit(limit)
            .all()
        )

    def totals(self) -> list:
        return [order.total for order in self._dao.query.limit(None).all().items]


def line_items_referencing(product_id) -> int:
    """Number of order line items, across all orders, that point at ``product_id``."""
    return current_domain.repository_for(OrderItem)._dao.query.filter(product_id=str(product_id)).count()
