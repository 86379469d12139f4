"""
Integration tests for error rendering, the catch-all route and the docs page.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from placeholder_api.api.v1.dependencies import get_container

pytestmark = pytest.mark.integration


class TestErrorHandling:
    """Every failure comes back as {"error": message}"""

    @pytest.mark.parametrize(
        "method,path",
        [("GET", "/nope"), ("PATCH", "/posts"), ("GET", "/posts/1/comments"), ("DELETE", "/users")],
    )
    def test_unmatched_route(self, client, method, path):
        response = client.request(method, path)

        assert response.status_code == 404
        assert response.json() == {"error": "Route not found"}

    def test_invalid_json_body(self, client):
        response = client.post(
            "/posts",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert set(response.json()) == {"error"}

    def test_wrongly_typed_field(self, client):
        response = client.post("/posts", json={"title": "t", "body": "b", "userId": "abc"})

        assert response.status_code == 400
        assert "userId" in response.json()["error"]

    def test_unhandled_error_returns_500(self, app):
        failing_use_case = MagicMock()
        failing_use_case.execute = AsyncMock(side_effect=RuntimeError("database is locked"))
        container = MagicMock()
        container.get.return_value = failing_use_case
        app.dependency_overrides[get_container] = lambda: container

        with TestClient(app, raise_server_exceptions=False) as c:
            response = c.get("/users")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestDocsPage:
    """Tests for GET /"""

    def test_docs_page_is_html(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "/posts/:id" in response.text
        assert "/register" in response.text
