"""HTTP client for the remote GraphQL endpoint."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from gqlsource.adapters.http_resilience import ResilientClient

from .schema import GraphQLResponse

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from types import TracebackType

    from gqlsource.config.http_resilience import ResilienceConfig
    from gqlsource.config.source import SourceConfig

log = getLogger(__name__)


class GraphQLAPIError(RuntimeError):
    """Raised when the GraphQL endpoint returns errors or an unexpected payload."""

    def __init__(self, message: str, *, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class GraphQLClient:
    """Async GraphQL client holding one HTTP connection pool per run.

    Use it as an async context manager; ``execute`` matches the
    ``GraphQLExecutor`` port so hooks can query the source directly.
    """

    def __init__(
        self,
        *,
        config: SourceConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or _default_client_factory
        self._client: ResilientClient | None = None

    async def __aenter__(self) -> GraphQLClient:
        self._client = self._client_factory(self._config.resilience)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
        self._client = None

    async def execute(
        self, query: str, variables: Mapping[str, object] | None = None
    ) -> dict[str, Any]:
        """Run ``query`` and return its ``data`` object."""

        if self._client is None:
            raise GraphQLAPIError("GraphQL client used outside of its async context")

        response = await self._client.post(
            self._config.url,
            json={"query": query, "variables": dict(variables or {})},
        )
        response.raise_for_status()

        try:
            envelope = GraphQLResponse.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise GraphQLAPIError("Unexpected GraphQL response payload") from exc

        if envelope.errors:
            messages = [error.message for error in envelope.errors]
            log.error("GraphQL errors from %s: %s", self._config.url, "; ".join(messages))
            raise GraphQLAPIError(f"GraphQL request failed: {messages[0]}", errors=messages)

        if envelope.data is None:
            raise GraphQLAPIError("GraphQL response carried no data")

        return envelope.data
