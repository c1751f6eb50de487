"""Tests for data models."""

import pytest
from pydantic import ValidationError

from models.data_models import PrimaryLanguage, RepositorySummary, ShowcaseState
from conftest import make_node


class TestRepositorySummary:
    """Tests for RepositorySummary model."""

    def test_parses_graphql_node(self):
        """Validate a node straight from the GraphQL response."""
        node = make_node(
            "MDEwOlJlcG9zaXRvcnkxMjk2MjY5", "octocat/Hello-World",
            fork_count=3, stars=10, language={"name": "Go", "color": "#00ADD8"},
            description="My first repository on GitHub!",
        )

        repo = RepositorySummary.model_validate(node)

        assert repo.id == "MDEwOlJlcG9zaXRvcnkxMjk2MjY5"
        assert repo.name_with_owner == "octocat/Hello-World"
        assert repo.name == "Hello-World"
        assert repo.description == "My first repository on GitHub!"
        assert repo.fork_count == 3
        assert repo.star_count == 10
        assert repo.url == "https://github.com/octocat/Hello-World"
        assert repo.disk_usage_kb == 108
        assert repo.primary_language == PrimaryLanguage(name="Go", color="#00ADD8")

    def test_optional_fields(self):
        """Description, disk usage and language may be null."""
        node = make_node("2", "octocat/Spoon-Knife")
        node["diskUsage"] = None

        repo = RepositorySummary.model_validate(node)

        assert repo.description is None
        assert repo.disk_usage_kb is None
        assert repo.primary_language is None

    def test_language_without_color(self):
        """GitHub reports some languages without a color."""
        node = make_node("3", "octocat/linguist", language={"name": "Roff", "color": None})
        repo = RepositorySummary.model_validate(node)
        assert repo.primary_language.name == "Roff"
        assert repo.primary_language.color is None

    def test_null_stargazers_counts_as_zero(self):
        node = make_node("4", "octocat/empty")
        node["stargazers"] = None
        assert RepositorySummary.model_validate(node).star_count == 0

    def test_non_object_stargazers_rejected(self):
        node = make_node("4", "octocat/empty")
        node["stargazers"] = 5
        with pytest.raises(ValidationError, match="stargazers"):
            RepositorySummary.model_validate(node)

    def test_populate_by_field_name(self):
        """Models can be built with snake_case names too."""
        repo = RepositorySummary(
            id="5",
            name_with_owner="octocat/test-repo",
            fork_count=0,
            star_count=7,
            url="https://github.com/octocat/test-repo",
        )
        assert repo.star_count == 7

    def test_negative_counts_rejected(self):
        node = make_node("6", "octocat/bad", fork_count=-1)
        with pytest.raises(ValidationError):
            RepositorySummary.model_validate(node)

    def test_missing_required_field_rejected(self):
        node = make_node("7", "octocat/bad")
        del node["url"]
        with pytest.raises(ValidationError):
            RepositorySummary.model_validate(node)


class TestShowcaseState:
    """Tests for ShowcaseState model."""

    def test_defaults_to_idle(self):
        state = ShowcaseState()
        assert state.status == "idle"
        assert state.repositories == []
        assert state.error is None

    def test_rejects_unknown_status(self):
        with pytest.raises(ValidationError):
            ShowcaseState(status="done")

    def test_json_dump_uses_field_names(self):
        """Serialized state keeps snake_case keys."""
        repo = RepositorySummary.model_validate(make_node("1", "octocat/Hello-World", stars=10))
        dumped = ShowcaseState(status="loaded", repositories=[repo]).model_dump(mode="json")
        assert dumped["status"] == "loaded"
        assert dumped["repositories"][0]["name_with_owner"] == "octocat/Hello-World"
        assert dumped["repositories"][0]["star_count"] == 10
