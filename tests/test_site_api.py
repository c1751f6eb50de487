"""
Tests for the portfolio site routes.

These tests use FastAPI's TestClient with requests.post patched, so no
running server or real GitHub token is needed.
"""

from unittest.mock import patch

import pytest
import requests
from fastapi.testclient import TestClient

from backend.app import create_app
from conftest import make_node, make_payload, make_response


@pytest.fixture
def client(config):
    """Create FastAPI test client with an injected config."""
    app = create_app(config)
    with TestClient(app) as test_client:
        yield test_client


class TestIndex:
    """Tests for GET /."""

    def test_renders_cards(self, client, octocat_payload):
        with patch("requests.post", return_value=make_response(octocat_payload)) as mock_post:
            response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert response.text.count('class="repo-card-div"') == 2
        assert response.text.index("Hello-World") < response.text.index("Spoon-Knife")
        mock_post.assert_called_once()

    def test_fetches_once_per_request(self, client, octocat_payload):
        with patch("requests.post", return_value=make_response(octocat_payload)) as mock_post:
            client.get("/")
            client.get("/")

        assert mock_post.call_count == 2

    def test_failed_fetch_still_renders_page(self, client):
        with patch("requests.post", side_effect=requests.ConnectionError("boom")):
            response = client.get("/")

        assert response.status_code == 200
        assert 'class="repo-card-div"' not in response.text
        assert "Some Things I've Built" in response.text


class TestListRepositories:
    """Tests for GET /api/repositories."""

    def test_loaded(self, client, octocat_payload):
        with patch("requests.post", return_value=make_response(octocat_payload)):
            response = client.get("/api/repositories")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "loaded"
        assert data["error"] is None
        assert [r["id"] for r in data["repositories"]] == ["1", "2"]
        assert data["repositories"][0]["star_count"] == 10
        assert data["repositories"][0]["primary_language"] == {"name": "Go", "color": "#00ADD8"}
        assert data["repositories"][1]["primary_language"] is None

    def test_empty(self, client):
        with patch("requests.post", return_value=make_response(make_payload([]))):
            response = client.get("/api/repositories")

        assert response.status_code == 200
        assert response.json()["repositories"] == []

    def test_malformed_owner_is_bad_gateway(self, client):
        payload = {"data": {"repositoryOwner": "octocat"}}
        with patch("requests.post", return_value=make_response(payload)):
            response = client.get("/api/repositories")

        assert response.status_code == 502
        assert response.json()["status"] == "failed"

    def test_unknown_account_is_bad_gateway(self, client):
        payload = {"data": {"repositoryOwner": None}}
        with patch("requests.post", return_value=make_response(payload)):
            response = client.get("/api/repositories")

        assert response.status_code == 502
        data = response.json()
        assert data["status"] == "failed"
        assert "Account not found" in data["error"]
        assert data["repositories"] == []

    def test_query_uses_configured_account(self, client):
        payload = make_payload([make_node("1", "octocat/Hello-World")])
        with patch("requests.post", return_value=make_response(payload)) as mock_post:
            client.get("/api/repositories")

        query = mock_post.call_args[1]["json"]["query"]
        assert 'repositoryOwner(login: "octocat")' in query
        assert "pinnedRepositories(first: 6)" in query


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
