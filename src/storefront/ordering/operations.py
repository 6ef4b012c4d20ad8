"""Order operations exposed to the HTTP layer."""

import decimal
import json

from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.errors import Forbidden, NotFound, flatten_errors
from storefront.identity.user import User
from storefront.ordering.order import Order
from storefront.ordering.placement import PlaceOrder
from storefront.pagination import page_window
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_CENT = decimal.Decimal("0.01")
_SUMMARY_FIELDS = ("id", "name", "category")
_DETAIL_FIELDS = ("id", "name", "description", "category")


class _Lookup:
    """Memoized loads of the products and owners referenced by a batch of orders."""

    def __init__(self):
        self._products = {}
        self._users = {}

    def product(self, product_id, fields=_SUMMARY_FIELDS) -> dict | None:
        if product_id not in self._products:
            self._products[product_id] = current_domain.repository_for(Product).get_or_none(product_id)
        product = self._products[product_id]
        if product is None:
            return None
        return {field: str(product.id) if field == "id" else getattr(product, field) for field in fields}

    def owner(self, user_id) -> dict | None:
        if user_id not in self._users:
            self._users[user_id] = current_domain.repository_for(User).get_or_none(user_id)
        user = self._users[user_id]
        if user is None:
            return None
        return {"id": str(user.id), "name": user.name, "email": user.email}


def _line_items(order: Order, lookup: _Lookup, fields=_SUMMARY_FIELDS, with_subtotal=False) -> list[dict]:
    items = []
    for item in order.items:
        line = {
            "id": str(item.id),
            "quantity": item.quantity,
            "price": item.price,
            "product": lookup.product(item.product_id, fields),
        }
        if with_subtotal:
            line["subtotal"] = item.subtotal
        items.append(line)
    return items


def _order_summary(order: Order, lookup: _Lookup, with_owner=False) -> dict:
    items = _line_items(order, lookup)
    summary = {
        "id": str(order.id),
        "total": order.total,
        "created_at": order.created_at,
        "items_count": len(items),
        "items": items,
    }
    if with_owner:
        summary["user"] = lookup.owner(order.user_id)
    return summary


@flatten_errors("Failed to create order")
def place_order(user_id, items) -> dict:
    """Place an order for ``items``, a list of ``{"product_id", "quantity"}`` mappings."""
    command = PlaceOrder(
        user_id=user_id,
        items=json.dumps([{"product_id": str(i["product_id"]), "quantity": int(i["quantity"])} for i in items]),
    )
    order_id = current_domain.process(command, asynchronous=False)
    order = current_domain.repository_for(Order).get(order_id)

    logger.info("order.placed", order_id=order_id, user_id=user_id, total=str(order.total))
    return {
        "message": "Order created successfully",
        "order": {
            "id": str(order.id),
            "total": order.total,
            "created_at": order.created_at,
            "items": _line_items(order, _Lookup()),
        },
    }


def _listing(user_id=None, page=None, limit=None, sort_by="createdAt", sort_order="desc") -> dict:
    window = page_window(page, limit)
    results = current_domain.repository_for(Order).page(
        user_id=user_id,
        sort_by=sort_by,
        sort_order=sort_order,
        offset=window.offset,
        limit=window.size,
    )
    lookup = _Lookup()
    return {
        "orders": [_order_summary(order, lookup, with_owner=user_id is None) for order in results.items],
        "pagination": window.describe(results.total),
    }


@flatten_errors("Failed to fetch orders")
def find_all_by_user(user_id, page=None, limit=None, sort_by="createdAt", sort_order="desc") -> dict:
    return _listing(user_id=user_id, page=page, limit=limit, sort_by=sort_by, sort_order=sort_order)


@flatten_errors("Failed to fetch orders")
def find_all(page=None, limit=None, sort_by="createdAt", sort_order="desc") -> dict:
    """Every order across all users, each with its owner's public projection."""
    return _listing(page=page, limit=limit, sort_by=sort_by, sort_order=sort_order)


@flatten_errors("Invalid order ID")
def find_one(order_id, user_id, is_admin=False) -> dict:
    order = current_domain.repository_for(Order).get_or_none(order_id)
    if order is None:
        raise NotFound(f"Order with ID {order_id} not found")
    if not (is_admin or order.belongs_to(user_id)):
        raise Forbidden("You can only access your own orders")

    lookup = _Lookup()
    return {
        "id": str(order.id),
        "total": order.total,
        "created_at": order.created_at,
        "updated_at": order.updated_at,
        "user": lookup.owner(order.user_id),
        "items": _line_items(order, lookup, fields=_DETAIL_FIELDS, with_subtotal=True),
    }


@flatten_errors("Failed to fetch order statistics")
def get_order_stats() -> dict:
    totals = current_domain.repository_for(Order).totals()
    revenue = sum(totals, start=decimal.Decimal("0"))
    return {
        "total_orders": len(totals),
        "total_revenue": revenue,
        "avg_order_value": (revenue / len(totals)).quantize(_CENT) if totals else decimal.Decimal("0"),
    }
