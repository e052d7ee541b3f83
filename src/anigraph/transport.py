"""Dispatchers that send GraphQL documents to AniList.

The facade only depends on the ``Dispatcher`` protocol. ``GraphQLDispatcher``
is the default implementation: a single POST per call over
``httpx.AsyncClient``, with no retries or rate limiting.
"""

from collections.abc import Mapping
from http import HTTPStatus
from typing import Any, Protocol

import httpx

from anigraph.errors import TransportError
from anigraph.models import AuthorizationState
from anigraph.settings import DEFAULT_API_URL, DEFAULT_TIMEOUT
from anigraph.utils.debug import debug, warn


class Dispatcher(Protocol):
    """Sends a query document and returns the GraphQL ``data`` object."""

    async def send(self, query: str, variables: Mapping[str, Any]) -> dict[str, Any]:
        """Send *query* with *variables*.

        Raises:
            TransportError: On any network, HTTP or GraphQL failure.
        """
        ...


class GraphQLDispatcher:
    """Async dispatcher for the AniList GraphQL endpoint.

    The Authorization header is only attached when the authorization state
    holds a token. A caller-supplied ``httpx.AsyncClient`` is reused and left
    open on ``aclose``; a client created here is closed.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        auth: AuthorizationState | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            api_url: GraphQL endpoint to POST to.
            auth: Authorization state; its token becomes a Bearer header.
            timeout: Request timeout in seconds.
            client: Optional shared HTTP client.
        """
        self.api_url = api_url
        self.auth = auth if auth is not None else AuthorizationState()
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    def _headers(self) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        token = self.auth.secret()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    async def send(self, query: str, variables: Mapping[str, Any]) -> dict[str, Any]:
        """POST a GraphQL document and return its ``data`` object.

        Args:
            query: The GraphQL document text.
            variables: JSON-compatible variable values.

        Returns:
            The ``data`` member of the GraphQL response.

        Raises:
            TransportError: If the request fails, the body is not JSON, the
                response reports GraphQL errors, or no data is returned.
        """
        debug(f"POST {self.api_url} variables={sorted(variables)}")
        try:
            response = await self._get_client().post(
                self.api_url,
                json={"query": query, "variables": dict(variables)},
                headers=self._headers(),
                timeout=self.timeout,
            )
        except httpx.HTTPError as exc:
            warn(f"AniList request failed: {exc}")
            raise TransportError(f"AniList request failed: {exc}") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            warn(f"AniList returned a non-JSON body (HTTP {response.status_code})")
            raise TransportError(
                f"Malformed response from AniList (HTTP {response.status_code})",
                status_code=response.status_code,
            ) from exc

        errors = payload.get("errors") if isinstance(payload, dict) else None
        if errors and not (isinstance(errors, list) and isinstance(errors[0], dict)):
            warn(f"AniList returned malformed errors (HTTP {response.status_code})")
            raise TransportError(
                "Malformed GraphQL errors from AniList",
                status_code=response.status_code,
            )
        if errors:
            message = errors[0].get("message", "Unknown GraphQL error")
            warn(f"AniList reported {len(errors)} error(s): {message}")
            raise TransportError(
                message, status_code=response.status_code, errors=errors
            )

        if response.status_code >= HTTPStatus.BAD_REQUEST:
            warn(f"AniList returned HTTP {response.status_code}")
            raise TransportError(
                f"AniList returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, dict):
            raise TransportError(
                "AniList response contained no data",
                status_code=response.status_code,
            )
        return data

    async def aclose(self) -> None:
        """Close the HTTP client if this dispatcher created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "GraphQLDispatcher":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
