"""Shared BDD fixtures and step definitions for accounts."""

import pytest
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, then
from storefront.errors import ErrorKind
from storefront.identity import authentication
from storefront.identity.user import User


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
@given(parsers.cfparse('"{email}" has registered with password "{password}"'))
def registered_account(email, password):
    authentication.register(name="Existing Shopper", email=email, password=password)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("an access token is issued")
def access_token_issued(result):
    assert result is not None
    assert result["access_token"]


@then("the request is rejected as a conflict")
def rejected_as_conflict(error):
    assert error["exc"] is not None
    assert error["exc"].kind is ErrorKind.CONFLICT


@then(parsers.cfparse('the request is rejected with "{message}"'))
def rejected_with(error, message):
    assert error["exc"] is not None
    assert error["exc"].message == message


@then(parsers.cfparse('the account "{email}" is not an admin'))
def account_is_not_admin(email):
    user = current_domain.repository_for(User).find_by_email(email)
    assert user.is_admin is False
