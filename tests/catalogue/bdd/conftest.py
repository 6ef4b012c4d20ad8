"""Shared BDD fixtures and step definitions for the catalogue."""

from decimal import Decimal

import pytest
from pytest_bdd import given, parsers, then
from storefront.catalogue import operations
from storefront.errors import NotFound


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured storefront errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a product "{name}" priced at {price} with {stock:d} in stock'),
    target_fixture="product",
)
def existing_product(name, price, stock):
    return operations.create_product(
        name=name, price=Decimal(price), stock=stock, category="Electronics"
    )["product"]


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the product has {stock:d} in stock"))
def product_has_stock(product, stock):
    assert operations.find_one(product["id"])["stock"] == stock


@then(parsers.cfparse("the product is priced at {price}"))
def product_is_priced_at(product, price):
    assert operations.find_one(product["id"])["price"] == Decimal(price)


@then(parsers.cfparse('the product is named "{name}"'))
def product_is_named(product, name):
    assert operations.find_one(product["id"])["name"] == name


@then("the product can no longer be found")
def product_is_gone(product):
    with pytest.raises(NotFound):
        operations.find_one(product["id"])


@then("the product can still be found")
def product_still_exists(product):
    assert operations.find_one(product["id"])["id"] == product["id"]


@then(parsers.cfparse('the request is rejected with "{message}"'))
def rejected_with(error, message):
    assert error["exc"] is not None
    assert error["exc"].message == message
