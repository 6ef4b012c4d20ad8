"""Integration tests for the /auth endpoints."""

from protean.utils.globals import current_domain
from storefront.identity.user import User


def register_payload(**overrides):
    payload = {"name": "Ada Lovelace", "email": "ada@example.com", "password": "analytical"}
    payload.update(overrides)
    return payload


class TestRegisterEndpoint:
    def test_register(self, client):
        response = client.post("/auth/register", json=register_payload())
        assert response.status_code == 201

        data = response.json()
        assert data["message"] == "User registered successfully"
        assert data["access_token"]
        assert data["user"]["email"] == "ada@example.com"
        assert data["user"]["isAdmin"] is False
        assert "createdAt" in data["user"]
        assert "password" not in data["user"]
        assert "passwordHash" not in data["user"]

        user = current_domain.repository_for(User).get(data["user"]["id"])
        assert user.name == "Ada Lovelace"

    def test_register_admin(self, client):
        response = client.post("/auth/register", json=register_payload(isAdmin=True))
        assert response.status_code == 201
        assert response.json()["user"]["isAdmin"] is True

    def test_duplicate_email_is_a_conflict(self, client):
        client.post("/auth/register", json=register_payload())
        response = client.post("/auth/register", json=register_payload(email="ADA@example.com"))
        assert response.status_code == 409
        assert response.json() == {"error": "User with this email already exists", "statusCode": 409}

    def test_invalid_email_fails_validation(self, client):
        response = client.post("/auth/register", json=register_payload(email="not-an-email"))
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "Validation failed"
        assert "email" in body["fields"]

    def test_short_password_fails_validation(self, client):
        response = client.post("/auth/register", json=register_payload(password="123"))
        assert response.status_code == 400
        assert "password" in response.json()["fields"]

    def test_long_ascii_password_is_accepted(self, client):
        response = client.post("/auth/register", json=register_payload(password="a" * 80))
        assert response.status_code == 201

    def test_missing_name_fails_validation(self, client):
        payload = register_payload()
        del payload["name"]
        response = client.post("/auth/register", json=payload)
        assert response.status_code == 400
        assert "name" in response.json()["fields"]


class TestLoginEndpoint:
    def test_login(self, client):
        client.post("/auth/register", json=register_payload())
        response = client.post("/auth/login", json={"email": "ada@example.com", "password": "analytical"})
        assert response.status_code == 200

        data = response.json()
        assert data["message"] == "Login successful"
        assert data["access_token"]
        assert data["user"]["email"] == "ada@example.com"

    def test_wrong_password(self, client):
        client.post("/auth/register", json=register_payload())
        response = client.post("/auth/login", json={"email": "ada@example.com", "password": "nope-nope"})
        assert response.status_code == 401
        assert response.json()["error"] == "Invalid email or password"

    def test_unknown_email_matches_wrong_password(self, client):
        client.post("/auth/register", json=register_payload())
        wrong = client.post("/auth/login", json={"email": "ada@example.com", "password": "nope-nope"})
        unknown = client.post("/auth/login", json={"email": "bob@example.com", "password": "analytical"})
        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()


    def test_multibyte_password_round_trip(self, client):
        password = "é" * 40
        registered = client.post("/auth/register", json=register_payload(password=password))
        assert registered.status_code == 201

        response = client.post("/auth/login", json={"email": "ada@example.com", "password": password})
        assert response.status_code == 200
        assert response.json()["user"]["email"] == "ada@example.com"

    def test_wrong_long_password_is_unauthorized(self, client):
        client.post("/auth/register", json=register_payload())
        response = client.post("/auth/login", json={"email": "ada@example.com", "password": "é" * 40})
        assert response.status_code == 401
        assert response.json()["error"] == "Invalid email or password"


class TestProfileEndpoint:
    def test_profile(self, client, customer):
        response = client.get("/auth/profile", headers=customer)
        assert response.status_code == 200

        data = response.json()
        assert data["email"] == "ada@example.com"
        assert data["name"] == "Ada Lovelace"
        assert data["isAdmin"] is False
        assert "updatedAt" in data

    def test_profile_without_token(self, client):
        response = client.get("/auth/profile")
        assert response.status_code == 401
        assert response.json()["statusCode"] == 401

    def test_profile_with_garbage_token(self, client):
        response = client.get("/auth/profile", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.json()["error"] == "Invalid token"

    def test_profile_of_deleted_user(self, client, customer):
        repo = current_domain.repository_for(User)
        user = repo.find_by_email("ada@example.com")
        repo._dao.delete(user)

        response = client.get("/auth/profile", headers=customer)
        assert response.status_code == 401
        assert response.json()["error"] == "User no longer exists"


class TestRequestId:
    def test_response_carries_request_id(self, client):
        response = client.post("/auth/login", json={"email": "ada@example.com", "password": "analytical"})
        assert response.headers["X-Request-ID"]

    def test_incoming_request_id_is_echoed(self, client):
        response = client.get("/auth/profile", headers={"X-Request-ID": "req-123"})
        assert response.headers["X-Request-ID"] == "req-123"
