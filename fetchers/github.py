"""GitHub GraphQL client for fetching an account's pinned repositories.

One fetcher is built per page render from injected configuration; there is
no module-level client. Each call to ``fetch_pinned_repositories`` issues a
single POST, with no retry.
"""

import logging
from typing import Any, Optional

import requests
from pydantic import ValidationError

from models.data_models import RepositorySummary

logger = logging.getLogger(__name__)

GRAPHQL_ENDPOINT = "https://api.github.com/graphql"
PINNED_REPOSITORY_LIMIT = 6
REQUEST_TIMEOUT_SECONDS = 30

PINNED_REPOSITORIES_QUERY = """
{
  repositoryOwner(login: "%(login)s") {
    ... on User {
      pinnedRepositories(first: %(first)d) {
        edges {
          node {
            nameWithOwner
            description
            forkCount
            stargazers {
              totalCount
            }
            url
            id
            diskUsage
            primaryLanguage {
              name
              color
            }
          }
        }
      }
    }
  }
}
"""


class GraphQLError(Exception):
    """Raised when the GraphQL payload contains an ``errors`` list."""

    def __init__(self, messages: list[str]):
        self.messages = messages
        super().__init__(f"GraphQL errors: {messages}")


class ResponseShapeError(ValueError):
    """Raised when the response lacks the expected pinned-repositories path."""
    pass


def build_pinned_repositories_query(login: str, first: int = PINNED_REPOSITORY_LIMIT) -> str:
    """Build the pinned-repositories query for ``login``.

    The login is interpolated verbatim; config validation restricts it to
    legal GitHub logins, which never contain quotes.
    """
    return PINNED_REPOSITORIES_QUERY % {"login": login, "first": first}


class GitHubFetcher:
    """Fetch pinned repositories from the GitHub GraphQL API."""

    def __init__(self, token: str, login: str, endpoint: str = GRAPHQL_ENDPOINT):
        """Initialize GitHub GraphQL client.

        Args:
            token: GitHub personal access token for authentication
            login: Account whose pinned repositories are fetched
            endpoint: GraphQL endpoint URL
        """
        self.token = token
        self.login = login
        self.endpoint = endpoint
        self.headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }

    def _execute_query(self, query: str) -> dict[str, Any]:
        """Execute a GraphQL query once and return its ``data`` object.

        Raises:
            requests.HTTPError: On non-2xx responses (auth errors are logged first)
            requests.RequestException: On transport failures
            GraphQLError: If the payload carries GraphQL errors
            ResponseShapeError: If the body is not a JSON object with ``data``
        """
        response = requests.post(
            self.endpoint,
            json={"query": query},
            headers=self.headers,
            timeout=REQUEST_TIMEOUT_SECONDS,
        )

        remaining = response.headers.get("X-RateLimit-Remaining")
        limit = response.headers.get("X-RateLimit-Limit")
        if remaining and limit:
            logger.debug(f"Rate limit: {remaining}/{limit} remaining")

        if response.status_code in (401, 403):
            logger.error(
                f"Authentication error: {response.status_code} - "
                f"{response.text[:200]}"
            )
        response.raise_for_status()

        try:
            payload = response.json()
        except ValueError as e:
            raise ResponseShapeError(f"Response body is not JSON: {e}") from e

        if not isinstance(payload, dict):
            raise ResponseShapeError("Response body is not a JSON object")

        errors = payload.get("errors")
        if errors:
            if not isinstance(errors, list) or not all(isinstance(err, dict) for err in errors):
                raise ResponseShapeError("Response has a malformed 'errors' list")
            messages = [err.get("message", "") for err in errors]
            raise GraphQLError(messages)

        data = payload.get("data")
        if not isinstance(data, dict):
            raise ResponseShapeError("Response is missing 'data'")
        return data

    def fetch_pinned_repositories(self, first: int = PINNED_REPOSITORY_LIMIT) -> list[RepositorySummary]:
        """Fetch the account's pinned repositories.

        Args:
            first: Number of pinned repositories to request (default: 6)

        Returns:
            Repository summaries in the order GitHub returned them.

        Raises:
            requests.RequestException: On transport or HTTP errors
            GraphQLError: If GitHub reports query errors
            ResponseShapeError: If the account does not exist or the
                pinned-repositories path is missing or malformed
        """
        logger.info(f"Fetching pinned repositories for {self.login} (first {first})")

        query = build_pinned_repositories_query(self.login, first)
        try:
            data = self._execute_query(query)
        except requests.RequestException as e:
            logger.error(f"Error fetching pinned repositories for {self.login}: {e}")
            raise

        repositories = parse_pinned_repositories(data)
        logger.info(f"Fetched {len(repositories)} pinned repositories for {self.login}")
        return repositories


def parse_pinned_repositories(data: Optional[dict[str, Any]]) -> list[RepositorySummary]:
    """Unwrap ``repositoryOwner.pinnedRepositories.edges[].node`` into models.

    A missing owner (unknown login) or missing edges list is an error; an
    empty edges list is a valid empty result.
    """
    owner = (data or {}).get("repositoryOwner")
    if owner is None:
        raise ResponseShapeError("Account not found: 'repositoryOwner' is null or missing")
    if not isinstance(owner, dict):
        raise ResponseShapeError("'repositoryOwner' is not an object")

    pinned = owner.get("pinnedRepositories")
    if not isinstance(pinned, dict) or not isinstance(pinned.get("edges"), list):
        raise ResponseShapeError("Response is missing 'pinnedRepositories.edges'")

    repositories = []
    for index, edge in enumerate(pinned["edges"]):
        node = edge.get("node") if isinstance(edge, dict) else None
        if not isinstance(node, dict):
            raise ResponseShapeError(f"Edge {index} has no 'node'")
        try:
            repositories.append(RepositorySummary.model_validate(node))
        except ValidationError as e:
            raise ResponseShapeError(f"Edge {index} has an invalid node: {e}") from e

    return repositories
