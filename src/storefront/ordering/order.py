"""Order aggregate with its OrderItem line items."""

import decimal
import json
from datetime import datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Decimal, HasMany, Identifier, Integer

from storefront.domain import storefront


@storefront.entity(part_of="Order", limit=-1)
class OrderItem:
    """One product, quantity and the unit price charged at the time of ordering.

    ``price`` is a snapshot: later changes to the product's price do not
    touch it.
    """

    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)
    price: Decimal(required=True, min_value=0, precision=10, scale=2)

    @property
    def subtotal(self):
        return self.price * self.quantity


@storefront.aggregate(limit=-1)
class Order:
    """A placed order. Its total is fixed when the order is placed."""

    user_id: Identifier(required=True)
    total: Decimal(required=True, min_value=0, precision=12, scale=2)
    items: HasMany(OrderItem)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def place(cls, user_id, lines):
        """Build an order from ``(product_id, quantity, unit_price)`` lines.

        The total is the sum of ``unit_price * quantity`` over all lines.
        """
        from storefront.ordering.events import OrderPlaced

        if not lines:
            raise ValidationError({"items": ["Order must contain at least one item"]})

        items = [
            OrderItem(product_id=product_id, quantity=quantity, price=price)
            for product_id, quantity, price in lines
        ]
        total = sum((item.subtotal for item in items), start=decimal.Decimal("0"))

        now = datetime.now()
        order = cls(
            user_id=user_id,
            total=total,
            items=items,
            created_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=order.id,
                user_id=user_id,
                total=total,
                item_count=len(items),
                items=json.dumps(
                    [
                        {"product_id": str(item.product_id), "quantity": item.quantity, "price": str(item.price)}
                        for item in items
                    ]
                ),
                placed_at=now,
            )
        )
        return order

    def belongs_to(self, user_id) -> bool:
        return str(self.user_id) == str(user_id)
