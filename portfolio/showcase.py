"""Repository showcase widget.

The showcase fetches an account's pinned repositories once per mount and
exposes them as cards. The hosting view calls ``mount()`` and then awaits
``initialize(token)`` from its startup routine; if the view is torn down
first, ``unmount()`` disposes the token and the late response is dropped.
"""

import asyncio
import logging
from typing import Optional

import requests
from pydantic import BaseModel

from fetchers.github import GitHubFetcher, GraphQLError, ResponseShapeError, PINNED_REPOSITORY_LIMIT
from models.config_models import Config
from models.data_models import RepositorySummary, ShowcaseState

logger = logging.getLogger(__name__)

# Errors that put the showcase into the "failed" state; anything else propagates
FETCH_ERRORS = (requests.RequestException, GraphQLError, ResponseShapeError)


class LivenessToken:
    """Tracks whether the view that started a fetch is still mounted."""

    def __init__(self):
        self._alive = True

    @property
    def alive(self) -> bool:
        return self._alive

    def dispose(self) -> None:
        self._alive = False


class RepositoryCard(BaseModel):
    """Everything a rendered card shows for one repository."""
    key: str
    name: str
    name_with_owner: str
    description: Optional[str] = None
    star_count: int
    fork_count: int
    url: str
    language_name: Optional[str] = None
    language_color: Optional[str] = None

    @classmethod
    def from_summary(cls, repo: RepositorySummary) -> "RepositoryCard":
        language = repo.primary_language
        return cls(
            key=repo.id,
            name=repo.name,
            name_with_owner=repo.name_with_owner,
            description=repo.description,
            star_count=repo.star_count,
            fork_count=repo.fork_count,
            url=repo.url,
            language_name=language.name if language else None,
            language_color=language.color if language else None,
        )


class RepositoryShowcase:
    """Fetch and display a bounded list of pinned repositories."""

    def __init__(self, fetcher: GitHubFetcher, limit: int = PINNED_REPOSITORY_LIMIT):
        self.fetcher = fetcher
        self.limit = limit
        self.state = ShowcaseState()
        self._token: Optional[LivenessToken] = None

    def mount(self) -> LivenessToken:
        """Mark the showcase as displayed and return its liveness token."""
        if self._token is None:
            self._token = LivenessToken()
        return self._token

    def unmount(self) -> None:
        """Dispose the liveness token so a pending response is discarded."""
        if self._token is not None:
            self._token.dispose()

    @property
    def mounted(self) -> bool:
        return self._token is not None and self._token.alive

    async def initialize(self, token: Optional[LivenessToken] = None) -> ShowcaseState:
        """Run the one fetch for this mount and return the resulting state.

        Calling again after the first call returns the current state without
        fetching. The blocking HTTP call runs in a worker thread.
        """
        if token is None:
            token = self.mount()

        if self.state.status != "idle":
            logger.debug(f"Showcase already initialized ({self.state.status}), skipping fetch")
            return self.state

        if not token.alive:
            logger.debug("Showcase unmounted before initialization, skipping fetch")
            return self.state

        self._apply(token, ShowcaseState(status="loading"))

        try:
            repositories = await asyncio.to_thread(self.fetcher.fetch_pinned_repositories, self.limit)
        except FETCH_ERRORS as e:
            logger.error(f"Pinned repository fetch failed: {e}")
            self._apply(token, ShowcaseState(status="failed", error=str(e)))
            return self.state

        self._apply(token, ShowcaseState(status="loaded", repositories=repositories))
        return self.state

    def _apply(self, token: LivenessToken, state: ShowcaseState) -> None:
        if not token.alive:
            logger.debug(f"Showcase unmounted, discarding '{state.status}' update")
            return
        self.state = state

    @property
    def cards(self) -> list[RepositoryCard]:
        """One card per distinct repository id, in API order, at most ``limit``."""
        if self.state.status != "loaded":
            return []

        cards = []
        seen = set()
        for repo in self.state.repositories:
            if repo.id in seen:
                continue
            seen.add(repo.id)
            cards.append(RepositoryCard.from_summary(repo))
        return cards[:self.limit]


def showcase_from_config(config: Config) -> RepositoryShowcase:
    """Build a showcase with its own fetcher from injected credentials."""
    fetcher = GitHubFetcher(
        token=config.credentials.github_token,
        login=config.credentials.github_username,
    )
    return RepositoryShowcase(fetcher)
