"""Product aggregate root."""

import decimal
from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Decimal, Integer, String, Text

from storefront.domain import storefront

_CENT = decimal.Decimal("0.01")
_TEXT_FIELDS = ("name", "description", "category")
_UPDATABLE_FIELDS = (*_TEXT_FIELDS, "price", "stock")


def _clean(value):
    return value.strip() if isinstance(value, str) else value


@storefront.aggregate(limit=-1)
class Product:
    """A sellable item with a price and a stock level."""

    name: String(required=True, max_length=255)
    description: Text()
    price: Decimal(required=True, min_value=0, precision=10, scale=2)
    stock: Integer(required=True, min_value=0)
    category: String(required=True, max_length=100)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def price_has_at_most_two_decimals(self):
        if self.price is not None and self.price != self.price.quantize(_CENT):
            raise ValidationError({"price": ["Price must have at most 2 decimal places"]})

    @classmethod
    def create(cls, name, price, stock, category, description=None):
        from storefront.catalogue.events import ProductAdded

        now = datetime.now()
        product = cls(
            name=_clean(name),
            description=_clean(description),
            price=price,
            stock=stock,
            category=_clean(category),
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=product.name,
                category=product.category,
                price=product.price,
                stock=product.stock,
                added_at=now,
            )
        )
        return product

    def update_details(self, **changes):
        """Apply only the fields that were supplied; ``None`` means "leave as is"."""
        from storefront.catalogue.events import ProductUpdated

        unknown = set(changes) - set(_UPDATABLE_FIELDS)
        if unknown:
            raise ValidationError({field: ["Field cannot be updated"] for field in sorted(unknown)})

        applied = {field: _clean(value) for field, value in changes.items() if value is not None}
        if not applied:
            return

        for field, value in applied.items():
            setattr(self, field, value)
        self.updated_at = datetime.now()

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                changed_fields=",".join(sorted(applied)),
                updated_at=self.updated_at,
            )
        )

    def has_stock_for(self, quantity: int) -> bool:
        return self.stock >= quantity

    def decrement_stock(self, quantity: int):
        from storefront.catalogue.events import StockDecremented

        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        if not self.has_stock_for(quantity):
            raise ValidationError(
                {"stock": [f"Cannot take {quantity} units, only {self.stock} in stock"]}
            )

        self.stock -= quantity
        self.updated_at = datetime.now()

        self.raise_(
            StockDecremented(
                product_id=self.id,
                quantity=quantity,
                remaining=self.stock,
            )
        )
