"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Decimal, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductAdded:
    """A product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    category: String(required=True)
    price: Decimal(required=True)
    stock: Integer(required=True)
    added_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductUpdated:
    """Some of a product's details, price or stock level were changed."""

    __version__ = 1

    product_id: Identifier(required=True)
    changed_fields: String(required=True)
    updated_at: DateTime(required=True)


@storefront.event(part_of="Product")
class ProductRemoved:
    """An unreferenced product was deleted from the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)


@storefront.event(part_of="Product")
class StockDecremented:
    """Units of a product were taken out of stock by an order."""

    __version__ = 1

    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    remaining: Integer(required=True)
