"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Decimal, Identifier, Integer, Text

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """An order was placed and stock was taken for every line item."""

    __version__ = 1

    order_id: Identifier(required=True)
    user_id: Identifier(required=True)
    total: Decimal(required=True)
    item_count: Integer(required=True)
    items: Text(required=True)  # JSON: list of {product_id, quantity, price}
    placed_at: DateTime(required=True)
