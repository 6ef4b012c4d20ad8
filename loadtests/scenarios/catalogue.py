"""Catalogue load test scenarios.

An administrator building and maintaining the catalogue, and anonymous
visitors browsing it.
"""

import random

from locust import HttpUser, SequentialTaskSet, TaskSet, between, task

from loadtests.data_generators import product_data, product_search_params, product_update_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import CatalogueState
from loadtests.scenarios.auth import sign_up


class CatalogueMaintenanceJourney(SequentialTaskSet):
    """Register admin -> Create 3 products -> Update one -> Read it back."""

    def on_start(self):
        self.state = CatalogueState()

    @task
    def register_admin(self):
        if not sign_up(self, self.state.account, is_admin=True):
            self.interrupt()

    @task(3)
    def create_product(self):
        with self.client.post(
            "/products",
            json=product_data(),
            headers=self.state.account.headers,
            catch_response=True,
            name="POST /products",
        ) as resp:
            if resp.status_code == 201:
                self.state.product_ids.append(resp.json()["product"]["id"])
            else:
                resp.failure(f"Create product failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def update_product(self):
        if not self.state.product_ids:
            self.interrupt()
        product_id = random.choice(self.state.product_ids)
        with self.client.put(
            f"/products/{product_id}",
            json=product_update_data(),
            headers=self.state.account.headers,
            catch_response=True,
            name="PUT /products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update product failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def read_back(self):
        if not self.state.product_ids:
            self.interrupt()
        product_id = random.choice(self.state.product_ids)
        with self.client.get(
            f"/products/{product_id}",
            catch_response=True,
            name="GET /products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Get product failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class BrowseCatalogue(TaskSet):
    """Anonymous browsing: listings with filters, categories and product pages."""

    @task(5)
    def list_products(self):
        with self.client.get(
            "/products",
            params=product_search_params(),
            catch_response=True,
            name="GET /products",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"List products failed: {resp.status_code} - {extract_error_detail(resp)}")
                return
            products = resp.json()["products"]
            if products:
                self.client.get(f"/products/{random.choice(products)['id']}", name="GET /products/{id}")

    @task(2)
    def categories(self):
        self.client.get("/products/categories", name="GET /products/categories")

    @task(1)
    def stop(self):
        self.interrupt()


class CatalogueUser(HttpUser):
    """Standalone user for catalogue-only load testing."""

    wait_time = between(1, 3)
    tasks = {CatalogueMaintenanceJourney: 1, BrowseCatalogue: 4}
