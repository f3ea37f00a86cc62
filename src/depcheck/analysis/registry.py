"""npm registry client.

Only the ``latest`` dist-tag of a package is consumed. Lookups are single
attempts: failures surface as RegistryLookupError and are never retried.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import quote

from aiohttp import ClientError, ClientResponse, ClientSession, ClientTimeout

from depcheck import __version__
from depcheck.core.exceptions.errors import RegistryLookupError
from depcheck.core.logger.logger import get_logger
from depcheck.models.report import RegistryInfo

logger = get_logger(__name__)


class BaseRegistryClient(ABC):
    """Base class for package registry clients."""

    async def __aenter__(self) -> "BaseRegistryClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Release client resources."""

    @abstractmethod
    async def fetch_latest(self, name: str) -> RegistryInfo:
        """Fetch the latest published version of a package.

        Args:
            name: Package name.

        Returns:
            Registry info for the package.

        Raises:
            RegistryLookupError: If the package cannot be resolved.
        """
        pass


class NpmRegistryClient(BaseRegistryClient):
    """Client for the npm registry HTTP API."""

    DEFAULT_URL = "https://registry.npmjs.org"

    # Abbreviated metadata still carries dist-tags and is much smaller.
    ACCEPT = "application/vnd.npm.install-v1+json; q=1.0, application/json; q=0.8"

    def __init__(
        self,
        base_url: str = DEFAULT_URL,
        timeout: float = 15.0,
    ) -> None:
        """Initialize the registry client.

        Args:
            base_url: Registry base URL.
            timeout: Total request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = ClientTimeout(total=timeout)
        self._session: ClientSession | None = None

    async def __aenter__(self) -> "NpmRegistryClient":
        """Enter async context manager."""
        await self._ensure_session()
        return self

    async def _ensure_session(self) -> ClientSession:
        """Ensure aiohttp session exists.

        Returns:
            ClientSession instance.
        """
        if self._session is None or self._session.closed:
            self._session = ClientSession(
                timeout=self.timeout,
                headers=self._get_default_headers(),
            )
        return self._session

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests.

        Returns:
            Dictionary of headers.
        """
        return {
            "Accept": self.ACCEPT,
            "User-Agent": f"depcheck/{__version__}",
        }

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    def package_url(self, name: str) -> str:
        """Build the metadata URL for a package.

        Scoped names keep their ``@`` and encode the separating slash.

        Args:
            name: Package name.

        Returns:
            Metadata URL.
        """
        return f"{self.base_url}/{quote(name, safe='@')}"

    async def fetch_latest(self, name: str) -> RegistryInfo:
        """Fetch the latest published version of a package.

        Args:
            name: Package name.

        Returns:
            Registry info for the package.

        Raises:
            RegistryLookupError: On network, HTTP or payload errors.
        """
        session = await self._ensure_session()
        url = self.package_url(name)
        logger.debug(f"Request: GET {url}")

        try:
            async with session.get(url) as response:
                data = await self._handle_response(response, name)
        except (ClientError, asyncio.TimeoutError) as e:
            raise RegistryLookupError(
                f"Registry request failed for {name}",
                package_name=name,
                details={"error": str(e) or e.__class__.__name__},
            ) from e

        return self._parse_latest(name, data)

    async def _handle_response(self, response: ClientResponse, name: str) -> dict[str, Any]:
        """Handle HTTP response.

        Args:
            response: aiohttp response object.
            name: Package name the request was made for.

        Returns:
            Parsed metadata document.

        Raises:
            RegistryLookupError: On HTTP errors or invalid JSON.
        """
        if response.status == 404:
            raise RegistryLookupError(
                f"Package not found in registry: {name}",
                package_name=name,
                status=response.status,
            )
        if response.status == 429:
            raise RegistryLookupError(
                f"Registry rate limit exceeded while fetching {name}",
                package_name=name,
                status=response.status,
            )
        if response.status >= 400:
            raise RegistryLookupError(
                f"HTTP {response.status}: {response.reason}",
                package_name=name,
                status=response.status,
            )

        try:
            data = await response.json(content_type=None)
        except ValueError as e:
            raise RegistryLookupError(
                f"Invalid registry response for {name}",
                package_name=name,
                status=response.status,
            ) from e

        if not isinstance(data, dict):
            raise RegistryLookupError(
                f"Invalid registry response for {name}",
                package_name=name,
                status=response.status,
            )
        return data

    def _parse_latest(self, name: str, data: dict[str, Any]) -> RegistryInfo:
        dist_tags = data.get("dist-tags")
        latest = dist_tags.get("latest") if isinstance(dist_tags, dict) else None
        if not isinstance(latest, str) or not latest:
            raise RegistryLookupError(
                f"No latest version published for {name}",
                package_name=name,
            )
        return RegistryInfo(name=name, latest_version=latest)
