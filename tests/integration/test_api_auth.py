"""
Integration tests for the /register and /login endpoints.
Runs the full app lifespan against a temporary SQLite store (seeded with 20 users).
Note: slower than the unit tests. Use: pytest tests/unit/ for fast unit-only runs.
"""
import pytest

pytestmark = pytest.mark.integration


NEW_USER = {
    "name": "Jane Tester",
    "username": "jane_tester_01",
    "email": "jane.tester.01@placeholder.test",
    "password": "s3cret-pass",
}


class TestRegisterAPI:
    """Tests for POST /register"""

    def test_register_success_omits_password(self, client):
        response = client.post("/register", json=NEW_USER)

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == NEW_USER["email"]
        assert data["username"] == NEW_USER["username"]
        assert isinstance(data["id"], int)
        assert "password" not in data
        assert data["address"] == {}
        assert data["company"] == {}

    def test_register_then_login(self, client):
        created = client.post("/register", json=NEW_USER).json()

        response = client.post(
            "/login",
            json={"email": NEW_USER["email"], "password": NEW_USER["password"]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == created["id"]
        assert "password" not in data

    def test_register_duplicate_email_keeps_first_user(self, client):
        first = client.post("/register", json=NEW_USER).json()

        response = client.post(
            "/register",
            json={**NEW_USER, "username": "someone_else", "name": "Impostor"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "User with this email or username already exists"}
        stored = client.get(f"/users/{first['id']}").json()
        assert stored["name"] == NEW_USER["name"]
        assert stored["username"] == NEW_USER["username"]

    def test_register_duplicate_username_keeps_first_user(self, client):
        first = client.post("/register", json=NEW_USER).json()

        response = client.post(
            "/register",
            json={**NEW_USER, "email": "other.address@placeholder.test", "name": "Impostor"},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "User with this email or username already exists"}
        stored = client.get(f"/users/{first['id']}").json()
        assert stored["name"] == NEW_USER["name"]
        assert stored["email"] == NEW_USER["email"]

    def test_long_password_registers_and_logs_in(self, client):
        long_password = "p" * 80

        created = client.post("/register", json={**NEW_USER, "password": long_password})
        login = client.post("/login", json={"email": NEW_USER["email"], "password": long_password})

        assert created.status_code == 201
        assert login.status_code == 200
        assert login.json()["id"] == created.json()["id"]

    def test_register_missing_field(self, client):
        response = client.post("/register", json={"name": "No Email", "username": "nomail", "password": "x"})

        assert response.status_code == 400
        assert response.json() == {"error": "email is required"}


class TestLoginAPI:
    """Tests for POST /login"""

    def test_seed_user_logs_in_with_placeholder_password(self, client):
        seed_user = client.get("/users/1").json()

        response = client.post("/login", json={"email": seed_user["email"], "password": "password"})

        assert response.status_code == 200
        assert response.json()["id"] == 1

    def test_wrong_password_returns_401(self, client):
        seed_user = client.get("/users/1").json()

        response = client.post("/login", json={"email": seed_user["email"], "password": "nope"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_unknown_email_returns_401(self, client):
        response = client.post("/login", json={"email": "ghost@placeholder.test", "password": "password"})

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    @pytest.mark.parametrize("body", [{}, {"email": "a@b.c"}, {"password": "x"}])
    def test_missing_fields_return_400(self, client, body):
        response = client.post("/login", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Email and password required"}
