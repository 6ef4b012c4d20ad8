"""Shared BDD fixtures and step definitions for ordering."""

from decimal import Decimal

import pytest
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, then
from storefront.catalogue import operations as catalogue
from storefront.catalogue.product import Product
from storefront.ordering.order import Order


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured storefront errors."""
    return {"exc": None}


@pytest.fixture()
def products():
    """Product ids by name, filled in by the Given steps."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" priced at {price} with {stock:d} in stock'))
def existing_product(products, name, price, stock):
    products[name] = catalogue.create_product(
        name=name, price=Decimal(price), stock=stock, category="Electronics"
    )["product"]["id"]


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('"{name}" has {stock:d} in stock'))
def product_has_stock(products, name, stock):
    assert current_domain.repository_for(Product).get(products[name]).stock == stock


@then("no orders exist")
def no_orders():
    assert current_domain.repository_for(Order)._dao.query.all().total == 0
