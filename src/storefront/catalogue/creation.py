"""Product creation: command and handler."""

from protean import handle
from protean.fields import Decimal, Integer, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront


@storefront.command(part_of="Product")
class AddProduct:
    name: String(required=True, max_length=255)
    description: Text()
    price: Decimal(required=True, min_value=0)
    stock: Integer(required=True, min_value=0)
    category: String(required=True, max_length=100)


@storefront.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            stock=command.stock,
            category=command.category,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
