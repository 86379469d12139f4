"""
Shared pytest fixtures for placeholder_api tests.
"""
import os
from unittest.mock import AsyncMock

# Cheap hashes for tests; must be set before settings are first read
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from placeholder_api.core.config import Settings
from placeholder_api.domain.models.user import User, Address, Geo, Company
from placeholder_api.domain.models.post import Post


def make_user(user_id: int = 1, **overrides) -> User:
    """Build a domain user with plausible defaults"""
    fields = dict(
        id=user_id,
        name=f"User {user_id}",
        username=f"user{user_id}",
        email=f"user{user_id}@example.com",
        hashed_password="$2b$04$hashedpasswordplaceholder",
        address=Address(
            street="Kulas Light",
            suite="Apt. 556",
            city="Gwenborough",
            zipcode="92998-3874",
            geo=Geo(lat="-37.3159", lng="81.1496"),
        ),
        phone="1-770-736-8031",
        website="hildegard.org",
        company=Company(name="Romaguera-Crona", catch_phrase="Multi-layered", bs="harness"),
    )
    fields.update(overrides)
    return User(**fields)


def make_post(post_id: int = 1, user_id: int = 1, **overrides) -> Post:
    """Build a domain post with its owner embedded"""
    fields = dict(
        id=post_id,
        user_id=user_id,
        title=f"Post {post_id}",
        body="Lorem ipsum dolor sit amet",
        user=make_user(user_id),
    )
    fields.update(overrides)
    return Post(**fields)


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    return AsyncMock()


@pytest.fixture
def mock_post_repo():
    """Mock PostRepository with async methods."""
    return AsyncMock()


@pytest.fixture
def app_settings(tmp_path, monkeypatch):
    """Settings pointing at a fresh store file in a temporary directory."""
    monkeypatch.setenv("DATABASE_FILE", str(tmp_path / "test.sqlite"))
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    monkeypatch.delenv("SEED_USER_COUNT", raising=False)
    return Settings()


@pytest.fixture
def app(app_settings):
    from placeholder_api.main import create_application

    return create_application(app_settings)


@pytest.fixture
def client(app):
    """TestClient running the full lifespan (open, schema, seed) against the temporary store."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def user_factory():
    return make_user


@pytest.fixture
def post_factory():
    return make_post
