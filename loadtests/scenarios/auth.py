"""Account load test scenarios.

Registration, login and profile reads. Steps execute in order: each depends
on the previous step succeeding.
"""

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import registration_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import AccountState


def sign_up(task_set, account: AccountState, is_admin: bool = False) -> bool:
    """Register a fresh account and keep its token on ``account``."""
    payload = registration_data(is_admin=is_admin)
    with task_set.client.post(
        "/auth/register",
        json=payload,
        catch_response=True,
        name="POST /auth/register",
    ) as resp:
        if resp.status_code != 201:
            resp.failure(f"Registration failed: {resp.status_code} - {extract_error_detail(resp)}")
            return False

        body = resp.json()
        account.email = payload["email"]
        account.password = payload["password"]
        account.token = body["access_token"]
        account.user_id = body["user"]["id"]
        return True


class NewAccountJourney(SequentialTaskSet):
    """Register -> Login -> Profile -> Failed login.

    The failed login is expected to answer 401 and is not counted as a failure.
    """

    def on_start(self):
        self.account = AccountState()

    @task
    def register(self):
        if not sign_up(self, self.account):
            self.interrupt()

    @task
    def login(self):
        with self.client.post(
            "/auth/login",
            json={"email": self.account.email, "password": self.account.password},
            catch_response=True,
            name="POST /auth/login",
        ) as resp:
            if resp.status_code == 200:
                self.account.token = resp.json()["access_token"]
            else:
                resp.failure(f"Login failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def profile(self):
        with self.client.get(
            "/auth/profile",
            headers=self.account.headers,
            catch_response=True,
            name="GET /auth/profile",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Profile failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def wrong_password(self):
        with self.client.post(
            "/auth/login",
            json={"email": self.account.email, "password": "definitely-not-it"},
            catch_response=True,
            name="POST /auth/login [wrong password]",
        ) as resp:
            if resp.status_code == 401:
                resp.success()
            else:
                resp.failure(f"Expected 401, got {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class AccountUser(HttpUser):
    """Standalone user for account-only load testing."""

    wait_time = between(1, 3)
    tasks = [NewAccountJourney]
