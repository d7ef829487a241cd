"""ecosyste.ms packages API resolver."""
from __future__ import annotations

import logging
from typing import Optional

import httpx
from packageurl import PackageURL
from pydantic import TypeAdapter, ValidationError

from purlinfo import __version__
from purlinfo.constants import ECOSYSTEMS_BASE_URL, ECOSYSTEMS_LOOKUP_PATH, TOOL_NAME
from purlinfo.exceptions import (
    InvalidResponseError,
    NotFoundError,
    RateLimitedError,
    ScopeError,
    TransportError,
    UpstreamError,
    UpstreamUnavailableError,
)
from purlinfo.models.package import LookupEntry, PackageInfo
from purlinfo.resolvers.base import BaseResolver
from purlinfo.scope import DeadlineScope

logger = logging.getLogger(__name__)

_LOOKUP_ADAPTER = TypeAdapter(list[LookupEntry])

UNAVAILABLE_STATUSES = frozenset({502, 503, 504})


def build_user_agent(email: str) -> str:
    """Build the polite pool User-Agent header value.

    Args:
        email: Contact address to identify the caller.

    Returns:
        Header value such as ``purlinfo/0.1.0 (mailto:me@example.com)``.
    """
    return f"{TOOL_NAME}/{__version__} (mailto:{email})"


def parse_lookup_response(content: bytes) -> list[LookupEntry]:
    """Decode a packages lookup response body.

    Args:
        content: Raw response body.

    Returns:
        The decoded lookup entries, possibly empty.

    Raises:
        InvalidResponseError: If the body is not a JSON array of lookup entries.
    """
    try:
        return _LOOKUP_ADAPTER.validate_json(content)
    except ValidationError as e:
        raise InvalidResponseError("invalid API response") from e


class EcosystemsResolver(BaseResolver):
    """Resolver that looks packages up through the ecosyste.ms packages API.

    The lookup endpoint accepts a purl and returns a JSON array of
    matching packages; the first match is used.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        email: Optional[str] = None,
    ) -> None:
        """Initialize the resolver.

        Args:
            base_url: API base URL. Defaults to the public ecosyste.ms API.
            client: Optional shared httpx.AsyncClient. If not provided,
                a new client is opened for each lookup.
            email: Optional contact email for the polite pool User-Agent.
        """
        self._base_url = (base_url or ECOSYSTEMS_BASE_URL).rstrip("/")
        self._client = client
        self._email = email or None

    @property
    def base_url(self) -> str:
        """API base URL used for lookups."""
        return self._base_url

    @property
    def lookup_url(self) -> str:
        """Full URL of the packages lookup endpoint."""
        return f"{self._base_url}{ECOSYSTEMS_LOOKUP_PATH}"

    def _headers(self) -> dict[str, str]:
        if self._email:
            return {"User-Agent": build_user_agent(self._email)}
        return {}

    async def resolve(self, scope: DeadlineScope, purl: PackageURL) -> PackageInfo:
        """Resolve package metadata from the packages lookup endpoint.

        Args:
            scope: Deadline scope bounding the HTTP request.
            purl: The package URL to look up.

        Returns:
            PackageInfo built from the first lookup match.

        Raises:
            NotFoundError: If the API reports no matching package.
            RateLimitedError: If the API responds with HTTP 429.
            UpstreamUnavailableError: If the API responds with 502, 503 or 504.
            UpstreamError: For any other non-200 status.
            InvalidResponseError: If the response body has the wrong shape.
            TransportError: If the request fails, is cancelled or times out.
        """
        purl_string = purl.to_string()
        response = await self._fetch(scope, purl_string)

        status = response.status_code
        if status == 404:
            raise NotFoundError(f"package not found: HTTP 404 for {purl_string}")
        if status == 429:
            raise RateLimitedError("rate limited by API: HTTP 429")
        if status in UNAVAILABLE_STATUSES:
            raise UpstreamUnavailableError(
                f"API service unavailable: HTTP {status}", status
            )
        if status != 200:
            raise UpstreamError(f"API error: HTTP {status}", status)

        entries = parse_lookup_response(response.content)
        if not entries:
            raise NotFoundError(f"package not found: {purl_string}")

        return entries[0].to_package_info(purl.type)

    async def _fetch(self, scope: DeadlineScope, purl_string: str) -> httpx.Response:
        """Send the lookup request inside the scope.

        Args:
            scope: Deadline scope bounding the request.
            purl_string: Canonical purl string for the query parameter.

        Returns:
            The HTTP response with its body read.

        Raises:
            TransportError: If the request fails, is cancelled or times out.
        """
        logger.debug("GET %s purl=%s", self.lookup_url, purl_string)
        try:
            if self._client is not None:
                response = await scope.run(self._get(self._client, scope, purl_string))
            else:
                async with httpx.AsyncClient() as client:
                    response = await scope.run(self._get(client, scope, purl_string))
        except ScopeError as e:
            raise TransportError("failed to make HTTP request") from e
        except httpx.RequestError as e:
            raise TransportError("failed to make HTTP request") from e

        logger.debug("lookup responded with HTTP %d", response.status_code)
        return response

    async def _get(
        self, client: httpx.AsyncClient, scope: DeadlineScope, purl_string: str
    ) -> httpx.Response:
        return await client.get(
            self.lookup_url,
            params={"purl": purl_string},
            headers=self._headers(),
            timeout=httpx.Timeout(scope.remaining()),
        )
