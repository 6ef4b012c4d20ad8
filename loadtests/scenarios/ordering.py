"""Ordering load test scenarios.

Shoppers placing orders against the live catalogue. Stock runs down as the
test progresses, so 400 "Insufficient stock" answers are expected and
counted separately from failures.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import order_data, product_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import CatalogueState, ShopperState
from loadtests.scenarios.auth import sign_up


class ShopperJourney(SequentialTaskSet):
    """Register -> Browse -> Place order -> My orders -> Order detail."""

    def on_start(self):
        self.state = ShopperState()

    @task
    def register(self):
        if not sign_up(self, self.state.account):
            self.interrupt()

    @task
    def browse(self):
        with self.client.get(
            "/products",
            params={"limit": 20, "sortBy": random.choice(["price", "createdAt"])},
            catch_response=True,
            name="GET /products",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Browse failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()
            self.state.seen_product_ids = [p["id"] for p in resp.json()["products"] if p["stock"] > 0]
            if not self.state.seen_product_ids:
                self.interrupt()

    @task
    def place_order(self):
        with self.client.post(
            "/orders",
            json=order_data(self.state.seen_product_ids),
            headers=self.state.account.headers,
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_ids.append(resp.json()["order"]["id"])
            elif resp.status_code == 400 and "Insufficient stock" in extract_error_detail(resp):
                resp.success()
                self.interrupt()
            else:
                resp.failure(f"Place order failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def my_orders(self):
        with self.client.get(
            "/orders",
            headers=self.state.account.headers,
            catch_response=True,
            name="GET /orders",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"My orders failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def order_detail(self):
        order_id = self.state.order_ids[-1]
        with self.client.get(
            f"/orders/{order_id}",
            headers=self.state.account.headers,
            catch_response=True,
            name="GET /orders/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Order detail failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class StockContentionJourney(SequentialTaskSet):
    """Admin creates a product with little stock, then hammers it with orders.

    Exercises the stock check under concurrent placement; stock must never
    go below zero.
    """

    def on_start(self):
        self.state = CatalogueState()

    @task
    def register_admin(self):
        if not sign_up(self, self.state.account, is_admin=True):
            self.interrupt()

    @task
    def create_scarce_product(self):
        with self.client.post(
            "/products",
            json=product_data(stock=5),
            headers=self.state.account.headers,
            catch_response=True,
            name="POST /products [scarce]",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Create product failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()
            self.state.product_ids.append(resp.json()["product"]["id"])

    @task(8)
    def order_one(self):
        with self.client.post(
            "/orders",
            json={"items": [{"productId": self.state.product_ids[0], "quantity": 1}]},
            headers=self.state.account.headers,
            catch_response=True,
            name="POST /orders [contended]",
        ) as resp:
            if resp.status_code in (201, 400):
                resp.success()
            else:
                resp.failure(f"Unexpected status: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def check_stock(self):
        with self.client.get(
            f"/products/{self.state.product_ids[0]}",
            catch_response=True,
            name="GET /products/{id} [contended]",
        ) as resp:
            if resp.status_code == 200 and resp.json()["stock"] < 0:
                resp.failure(f"Stock went negative: {resp.json()['stock']}")

    @task
    def stats(self):
        self.client.get("/orders/stats", headers=self.state.account.headers, name="GET /orders/stats")

    @task
    def done(self):
        self.interrupt()


class OrderingUser(HttpUser):
    """Standalone user for ordering-only load testing."""

    wait_time = between(0.5, 2)
    tasks = {ShopperJourney: 4, StockContentionJourney: 1}
