"""Domain tests for the Order aggregate and its line items."""

import json
from decimal import Decimal

import pytest
from protean.exceptions import ValidationError
from storefront.ordering.events import OrderPlaced
from storefront.ordering.order import Order, OrderItem

USER_ID = "0d9a3e7c-1b2f-4c5d-8e6f-7a8b9c0d1e2f"
KEYBOARD_ID = "6f1c2a9e-4b1d-4c8e-9a51-2f0f5d3b7c11"
MOUSE_ID = "7a2d3b0f-5c2e-4d9f-8b62-3a1e6e4c8d22"


class TestOrderItem:
    def test_subtotal(self):
        item = OrderItem(product_id=KEYBOARD_ID, quantity=3, price=Decimal("19.99"))
        assert item.subtotal == Decimal("59.97")

    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError) as exc:
            OrderItem(product_id=KEYBOARD_ID, quantity=0, price=Decimal("1.00"))
        assert "quantity" in exc.value.messages


class TestPlaceOrder:
    def test_total_is_sum_of_line_subtotals(self):
        order = Order.place(
            USER_ID,
            [(KEYBOARD_ID, 2, Decimal("100.00")), (MOUSE_ID, 1, Decimal("25.50"))],
        )
        assert order.total == Decimal("225.50")
        assert len(order.items) == 2

    def test_lines_keep_price_snapshot(self):
        order = Order.place(USER_ID, [(KEYBOARD_ID, 2, Decimal("100.00"))])
        item = order.items[0]
        assert str(item.product_id) == KEYBOARD_ID
        assert item.quantity == 2
        assert item.price == Decimal("100.00")

    def test_empty_order_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            Order.place(USER_ID, [])
        assert "items" in exc.value.messages

    def test_place_raises_order_placed(self):
        order = Order.place(USER_ID, [(KEYBOARD_ID, 2, Decimal("100.00"))])
        assert len(order._events) == 1

        event = order._events[0]
        assert isinstance(event, OrderPlaced)
        assert str(event.order_id) == str(order.id)
        assert event.total == Decimal("200.00")
        assert event.item_count == 1
        assert json.loads(event.items) == [{"product_id": KEYBOARD_ID, "quantity": 2, "price": "100.00"}]

    def test_timestamps_are_set(self):
        order = Order.place(USER_ID, [(KEYBOARD_ID, 1, Decimal("1.00"))])
        assert order.created_at is not None
        assert order.updated_at == order.created_at


class TestOwnership:
    def test_belongs_to_owner(self):
        order = Order.place(USER_ID, [(KEYBOARD_ID, 1, Decimal("1.00"))])
        assert order.belongs_to(USER_ID) is True

    def test_does_not_belong_to_someone_else(self):
        order = Order.place(USER_ID, [(KEYBOARD_ID, 1, Decimal("1.00"))])
        assert order.belongs_to("1e2d3c4b-5a69-4f0b-8a7c-5b6f3c1a9d2e") is False
