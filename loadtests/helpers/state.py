"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared across
users. State tracks ids and tokens returned by earlier steps so follow-up
requests can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class AccountState:
    """Credentials and bearer token of one simulated account."""

    email: str | None = None
    password: str | None = None
    token: str | None = None
    user_id: str | None = None

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}


@dataclass
class CatalogueState:
    """Products created by one simulated administrator."""

    account: AccountState = field(default_factory=AccountState)
    product_ids: list[str] = field(default_factory=list)


@dataclass
class ShopperState:
    """One simulated shopper: account, the products seen while browsing, orders placed."""

    account: AccountState = field(default_factory=AccountState)
    seen_product_ids: list[str] = field(default_factory=list)
    order_ids: list[str] = field(default_factory=list)
