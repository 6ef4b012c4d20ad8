"""Order placement: command and handler.

Placing an order is the one multi-aggregate write in the storefront. The
handler runs inside a single unit of work: the order, its line items and every
stock decrement are committed together or not at all.
"""

import json
from collections import defaultdict

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.errors import BadRequest, NotFound
from storefront.ordering.order import Order


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id: Identifier(required=True)
    items: Text(required=True)  # JSON: list of {"product_id", "quantity"}


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        products = current_domain.repository_for(Product)
        requested = json.loads(command.items)

        loaded: dict[str, Product] = {}
        taken: defaultdict[str, int] = defaultdict(int)
        lines = []

        # Validate every line, in the order given, before writing anything
        for entry in requested:
            product_id = str(entry["product_id"])
            quantity = int(entry["quantity"])

            if product_id not in loaded:
                product = products.get_or_none(product_id)
                if product is None:
                    raise NotFound(f"Product with ID {product_id} not found")
                loaded[product_id] = product
            product = loaded[product_id]

            available = product.stock - taken[product_id]
            if available < quantity:
                raise BadRequest(
                    f'Insufficient stock for product "{product.name}". '
                    f"Available: {available}, Requested: {quantity}"
                )

            taken[product_id] += quantity
            lines.append((product.id, quantity, product.price))

        order = Order.place(user_id=command.user_id, lines=lines)
        current_domain.repository_for(Order).add(order)

        # Stock is checked and decremented without row locks on SQL providers:
        # two concurrent orders can both pass the check above before either commits.
        # TODO: lock the product rows (SELECT ... FOR UPDATE) or compare versions on write.
        for product_id, quantity in taken.items():
            product = loaded[product_id]
            product.decrement_stock(quantity)
            products.add(product)

        return str(order.id)
