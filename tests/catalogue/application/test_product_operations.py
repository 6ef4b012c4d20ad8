"""Application tests for the catalogue operations."""

from decimal import Decimal

import pytest
from protean.utils.globals import current_domain
from storefront.catalogue import operations
from storefront.catalogue.product import Product
from storefront.errors import BadRequest, NotFound

MISSING_ID = "5b6f3c1a-9d2e-4f0b-8a7c-1e2d3c4b5a69"


def add(name="Keyboard", price="50.00", stock=10, category="Electronics", description=None):
    return operations.create_product(
        name=name,
        price=Decimal(price),
        stock=stock,
        category=category,
        description=description,
    )["product"]


class TestCreateProduct:
    def test_create_product(self):
        result = operations.create_product(
            name="Keyboard", price=Decimal("49.90"), stock=5, category="Electronics"
        )
        assert result["message"] == "Product created successfully"

        product = current_domain.repository_for(Product).get(result["product"]["id"])
        assert product.price == Decimal("49.90")
        assert product.stock == 5

    def test_create_product_stores_event(self):
        add()
        messages = current_domain.event_store.store.read("storefront::product")
        added = [
            m
            for m in messages
            if m.metadata and m.metadata.headers and m.metadata.headers.type == "Storefront.ProductAdded.v1"
        ]
        assert len(added) == 1

    def test_invalid_product_is_reported_with_operation_message(self):
        with pytest.raises(BadRequest) as exc:
            operations.create_product(name="Keyboard", price=Decimal("1.00"), stock=-1, category="Electronics")
        assert exc.value.message == "Failed to create product"


class TestFindOne:
    def test_find_one(self):
        product = add(name="Mouse")
        assert operations.find_one(product["id"])["name"] == "Mouse"

    def test_missing_product(self):
        with pytest.raises(NotFound) as exc:
            operations.find_one(MISSING_ID)
        assert exc.value.message == f"Product with ID {MISSING_ID} not found"


class TestUpdateProduct:
    def test_partial_update(self):
        product = add(name="Mouse", price="20.00", stock=3)
        result = operations.update_product(product["id"], stock=7)

        assert result["message"] == "Product updated successfully"
        assert result["product"]["stock"] == 7
        assert result["product"]["name"] == "Mouse"
        assert result["product"]["price"] == Decimal("20.00")

    def test_update_missing_product(self):
        with pytest.raises(NotFound):
            operations.update_product(MISSING_ID, stock=1)

    def test_update_to_negative_stock_is_rejected(self):
        product = add()
        with pytest.raises(BadRequest):
            operations.update_product(product["id"], stock=-1)
        assert operations.find_one(product["id"])["stock"] == 10


class TestRemoveProduct:
    def test_remove_unreferenced_product(self):
        product = add()
        result = operations.remove_product(product["id"])
        assert result["message"] == "Product deleted successfully"

        with pytest.raises(NotFound):
            operations.find_one(product["id"])

    def test_remove_missing_product(self):
        with pytest.raises(NotFound):
            operations.remove_product(MISSING_ID)


class TestCategories:
    def test_categories_are_distinct_and_sorted(self):
        add(name="Mouse", category="Electronics")
        add(name="Desk", category="Furniture")
        add(name="Keyboard", category="Electronics")
        add(name="Novel", category="Books")

        assert operations.get_categories() == ["Books", "Electronics", "Furniture"]

    def test_no_products_no_categories(self):
        assert operations.get_categories() == []
