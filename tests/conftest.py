import os
from pathlib import Path

import pytest
from protean.integrations.pytest import DomainFixture


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config environment before the domain module is first imported."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(scope="session")
def storefront_bed():
    from storefront.domain import storefront

    bed = DomainFixture(storefront)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(storefront_bed):
    with storefront_bed.domain_context():
        yield


# ---------------------------------------------------------------------------
# HTTP fixtures shared by the integration suites
# ---------------------------------------------------------------------------
def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def client(storefront_bed):
    from fastapi import FastAPI
    from fastapi.testclient import TestClient
    from storefront.api.auth import router as auth_router
    from storefront.api.errors import register_error_handlers
    from storefront.api.middleware import install_middleware
    from storefront.api.orders import router as order_router
    from storefront.api.products import router as product_router
    from storefront.domain import storefront

    app = FastAPI()
    install_middleware(app, storefront)
    register_error_handlers(app)
    app.include_router(auth_router)
    app.include_router(product_router)
    app.include_router(order_router)
    return TestClient(app)


@pytest.fixture()
def signup(client):
    """Register an account over HTTP and return its bearer headers."""

    def _signup(email="ada@example.com", name="Ada Lovelace", password="analytical", is_admin=False):
        response = client.post(
            "/auth/register",
            json={"name": name, "email": email, "password": password, "isAdmin": is_admin},
        )
        assert response.status_code == 201, response.text
        return bearer(response.json()["access_token"])

    return _signup


@pytest.fixture()
def customer(signup):
    return signup()


@pytest.fixture()
def admin(signup):
    return signup(email="grace@example.com", name="Grace Hopper", is_admin=True)


@pytest.fixture()
def stocked_product(client, admin):
    """Create a product over HTTP and return its JSON view."""

    def _stocked_product(name="Keyboard", price=100, stock=10, category="Electronics", description=None):
        payload = {"name": name, "price": price, "stock": stock, "category": category}
        if description is not None:
            payload["description"] = description
        response = client.post("/products", json=payload, headers=admin)
        assert response.status_code == 201, response.text
        return response.json()["product"]

    return _stocked_product
