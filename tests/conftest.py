"""Shared pytest fixtures and configuration."""

from unittest.mock import Mock

import pytest

from models.config_models import Config, CredentialsConfig, SiteMetadata


@pytest.fixture
def test_env(monkeypatch):
    """
    Set valid test environment variables.

    This fixture sets up test credentials so config can be loaded during
    tests without requiring a real token.
    """
    monkeypatch.setenv("GITHUB_TOKEN", "ghp_test_token_1234567890")
    monkeypatch.setenv("GITHUB_USERNAME", "octocat")
    monkeypatch.setenv("SITE_URL", "https://octocat.dev/")
    monkeypatch.setenv("SITE_AUTHOR", "Mona Octocat")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    return {
        "github_token": "ghp_test_token_1234567890",
        "github_username": "octocat",
        "site_url": "https://octocat.dev",
        "author": "Mona Octocat",
        "log_level": "DEBUG",
    }


@pytest.fixture
def invalid_env(monkeypatch):
    """
    Set up invalid/missing environment variables for testing validation.
    """
    monkeypatch.setenv("GITHUB_TOKEN", "")
    monkeypatch.setenv("GITHUB_USERNAME", "")


@pytest.fixture
def config():
    """Validated config for the octocat account."""
    return Config(
        credentials=CredentialsConfig(
            github_token="ghp_test_token_1234567890",
            github_username="octocat",
        ),
        site=SiteMetadata(
            site_url="https://octocat.dev",
            title="Mona Octocat",
            description="Building things on GitHub.",
            banner="/images/banner.png",
            author="Mona Octocat",
            twitter="octocat",
            facebook="Mona Octocat",
            build_time="2024-05-01",
        ),
    )


def make_node(id, name_with_owner, fork_count=0, stars=0, language=None, description=None):
    """Build a GraphQL repository node."""
    return {
        "nameWithOwner": name_with_owner,
        "description": description,
        "forkCount": fork_count,
        "stargazers": {"totalCount": stars},
        "url": f"https://github.com/{name_with_owner}",
        "id": id,
        "diskUsage": 108,
        "primaryLanguage": language,
    }


def make_payload(nodes):
    """Wrap nodes in the pinned-repositories response shape."""
    return {
        "data": {
            "repositoryOwner": {
                "pinnedRepositories": {
                    "edges": [{"node": node} for node in nodes]
                }
            }
        }
    }


def make_response(payload, status_code=200):
    """Mock requests.Response carrying ``payload`` as JSON."""
    response = Mock()
    response.status_code = status_code
    response.headers = {"X-RateLimit-Remaining": "4999", "X-RateLimit-Limit": "5000"}
    response.text = str(payload)
    response.json.return_value = payload
    return response


@pytest.fixture
def octocat_payload():
    """Two pinned repositories, the second without a primary language."""
    return make_payload([
        make_node(
            "1", "octocat/Hello-World", fork_count=3, stars=10,
            language={"name": "Go", "color": "#00ADD8"},
            description="My first repository on GitHub!",
        ),
        make_node("2", "octocat/Spoon-Knife", fork_count=1, stars=2, language=None),
    ])
