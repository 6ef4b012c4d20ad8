"""Product updates and removal: commands and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Decimal, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.errors import BadRequest, NotFound


@storefront.command(part_of="Product")
class UpdateProduct:
    """Change any subset of a product's fields. Unset fields are left alone."""

    product_id: Identifier(required=True)
    name: String(max_length=255)
    description: Text()
    price: Decimal(min_value=0)
    stock: Integer(min_value=0)
    category: String(max_length=100)


@storefront.command(part_of="Product")
class RemoveProduct:
    product_id: Identifier(required=True)


def load_product(product_id) -> Product:
    try:
        return current_domain.repository_for(Product).get(product_id)
    except ObjectNotFoundError:
        raise NotFound(f"Product with ID {product_id} not found") from None


@storefront.command_handler(part_of=Product)
class MaintainProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        product = load_product(command.product_id)
        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            stock=command.stock,
            category=command.category,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)

    @handle(RemoveProduct)
    def remove_product(self, command):
        from storefront.catalogue.events import ProductRemoved
        from storefront.ordering.repository import line_items_referencing

        product = load_product(command.product_id)
        if line_items_referencing(product.id) > 0:
            raise BadRequest(
                "Cannot delete product that exists in orders. Consider updating stock to 0 instead."
            )

        product.raise_(ProductRemoved(product_id=product.id, name=product.name))
        current_domain.repository_for(Product)._dao.delete(product)
        return str(product.id)
