"""Data models for pinned repositories and the showcase widget."""

from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class PrimaryLanguage(BaseModel):
    """Primary language of a repository as reported by GitHub."""
    name: str
    color: Optional[str] = None  # GitHub returns null for some languages


class RepositorySummary(BaseModel):
    """One pinned repository, parsed from a GraphQL ``node``.

    Field aliases match the GraphQL field names so a node can be validated
    directly; attribute names stay snake_case.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    name_with_owner: str = Field(alias="nameWithOwner")
    description: Optional[str] = None
    fork_count: int = Field(alias="forkCount", ge=0)
    star_count: int = Field(alias="starCount", ge=0)
    url: str
    disk_usage_kb: Optional[int] = Field(default=None, alias="diskUsage")
    primary_language: Optional[PrimaryLanguage] = Field(default=None, alias="primaryLanguage")

    @model_validator(mode="before")
    @classmethod
    def unwrap_stargazers(cls, data):
        """Flatten ``stargazers { totalCount }`` into ``starCount``."""
        if isinstance(data, dict) and "stargazers" in data and "starCount" not in data:
            data = dict(data)
            stargazers = data.pop("stargazers") or {}
            if not isinstance(stargazers, dict):
                raise ValueError("'stargazers' must be an object with 'totalCount'")
            data["starCount"] = stargazers.get("totalCount", 0)
        return data

    @property
    def name(self) -> str:
        """Repository name without the owner prefix."""
        return self.name_with_owner.split("/", 1)[-1]


class ShowcaseState(BaseModel):
    """State of the repository showcase.

    - idle: not initialized yet
    - loading: fetch in flight
    - loaded: ``repositories`` holds the fetched summaries in API order
    - failed: ``error`` holds the reason, ``repositories`` is empty
    """
    status: Literal["idle", "loading", "loaded", "failed"] = "idle"
    repositories: list[RepositorySummary] = Field(default_factory=list)
    error: Optional[str] = None


class NavLink(BaseModel):
    """Header menu entry."""
    label: str
    href: str
