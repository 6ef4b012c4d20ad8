"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's request validation and
use the camelCase field names the endpoints expect.
"""

import random
import uuid

from faker import Faker

fake = Faker()

CATEGORIES = ["Electronics", "Books", "Furniture", "Garden", "Toys", "Sports"]

# ---------- Accounts ----------


def valid_email() -> str:
    """Generate emails that are unique across Locust users."""
    local = fake.user_name()[:20]
    domain = fake.free_email_domain()
    return f"{local}.{uuid.uuid4().hex[:6]}@{domain}"


def password() -> str:
    """Between 6 and 72 characters, as registration requires."""
    return fake.password(length=random.randint(8, 24))


def registration_data(is_admin: bool = False) -> dict:
    return {
        "name": fake.name()[:100],
        "email": valid_email(),
        "password": password(),
        "isAdmin": is_admin,
    }


# ---------- Catalogue ----------


def price() -> float:
    """A positive price with at most two decimal places."""
    return round(random.uniform(1, 500), 2)


def product_data(stock: int | None = None) -> dict:
    return {
        "name": f"{fake.color_name()} {fake.word().title()} {uuid.uuid4().hex[:4]}"[:255],
        "description": fake.sentence(nb_words=12),
        "price": price(),
        "stock": stock if stock is not None else random.randint(50, 500),
        "category": random.choice(CATEGORIES),
    }


def product_update_data() -> dict:
    """A partial update touching one or two fields."""
    choices = {
        "price": price(),
        "stock": random.randint(0, 500),
        "description": fake.sentence(nb_words=10),
    }
    keys = random.sample(list(choices), k=random.randint(1, 2))
    return {key: choices[key] for key in keys}


def product_search_params() -> dict:
    params = {
        "page": random.randint(1, 3),
        "limit": random.choice([5, 10, 20]),
        "sortBy": random.choice(["name", "price", "createdAt"]),
        "sortOrder": random.choice(["asc", "desc"]),
    }
    if random.random() < 0.4:
        params["category"] = random.choice(CATEGORIES)
    if random.random() < 0.3:
        params["minPrice"] = random.randint(1, 100)
        params["maxPrice"] = params["minPrice"] + random.randint(50, 400)
    if random.random() < 0.2:
        params["search"] = fake.color_name().lower()[:4]
    return params


# ---------- Ordering ----------


def order_data(product_ids: list[str], max_lines: int = 3) -> dict:
    """An order over a random sample of ``product_ids``."""
    chosen = random.sample(product_ids, k=min(len(product_ids), random.randint(1, max_lines)))
    return {"items": [{"productId": product_id, "quantity": random.randint(1, 3)} for product_id in chosen]}
