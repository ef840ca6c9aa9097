"""Async HTTP client for the placeholder JSON API."""
from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

RESOURCE_KINDS = ("users", "posts", "albums", "todos", "comments")
FILTER_KEYS = ("userId", "postId")

DEFAULT_TIMEOUT = 10.0


class FetchError(Exception):
    """A collection could not be fetched or decoded."""


class PlaceholderClient:
    """Thin wrapper around `httpx.AsyncClient` serving whole collections.

    Every failure (transport, HTTP status, undecodable body) surfaces as a
    `FetchError`; callers never see httpx exceptions.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> PlaceholderClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self._client.aclose()

    async def fetch_collection(
        self,
        kind: str,
        filters: dict[str, int] | None = None,
    ) -> list[dict[str, Any]]:
        """Fetch every record of `kind`, optionally scoped by userId/postId.

        Args:
            kind: One of RESOURCE_KINDS
            filters: Optional mapping of a FILTER_KEYS key to an id

        Returns:
            The decoded records, in the order the API returned them

        Raises:
            FetchError: The request failed or the body was not a JSON list
            ValueError: Unknown kind or filter key
        """
        if kind not in RESOURCE_KINDS:
            raise ValueError(f"Unknown resource kind: {kind!r}")
        params = dict(filters or {})
        unknown = set(params) - set(FILTER_KEYS)
        if unknown:
            raise ValueError(f"Unsupported filter keys: {sorted(unknown)}")

        logger.debug("GET /%s params=%s", kind, params)
        try:
            response = await self._client.get(f"/{kind}", params=params)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as exc:
            raise FetchError(f"GET /{kind} failed: {exc}") from exc
        except ValueError as exc:
            # JSON decoding errors
            raise FetchError(f"GET /{kind} returned invalid JSON: {exc}") from exc

        if not isinstance(body, list):
            raise FetchError(f"GET /{kind} returned {type(body).__name__}, expected a list")
        logger.debug("GET /%s -> %d records", kind, len(body))
        return body
