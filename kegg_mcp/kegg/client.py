"""KEGG REST API client."""
import logging
from typing import Optional
from urllib.parse import quote

import httpx

from ..config import DEFAULT_KEGG_REST_BASE

logger = logging.getLogger(__name__)


class KEGGClient:
    """Async access to the KEGG REST operations used by the tools.

    Each operation returns the response body, or ``None`` when KEGG answers
    with a non-200 status or an empty body. Transport errors propagate as
    ``httpx.HTTPError``.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_KEGG_REST_BASE,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize KEGG client.

        Args:
            base_url: Base URL of the KEGG REST service
            timeout: Request timeout in seconds (0 disables it)
            transport: Optional httpx transport, used by tests
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout or None,
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def get_entry(self, entry_id: str) -> Optional[str]:
        """Fetch a flat-file entry (``/get/<entry_id>``)."""
        return await self._get(f"/get/{_segment(entry_id)}")

    async def find_entries(self, database: str, query: str) -> Optional[str]:
        """Search a database (``/find/<database>/<query>``).

        A ``/`` in the query is kept, so KEGG option forms such as
        ``C7H10O5/formula`` reach the service unchanged.
        """
        query = _segment(query, safe=":+/")
        return await self._get(f"/find/{_segment(database)}/{query}")

    async def list_entries(self, database: str) -> Optional[str]:
        """List all entries of a database (``/list/<database>``)."""
        return await self._get(f"/list/{_segment(database)}")

    async def _get(self, path: str) -> Optional[str]:
        logger.debug(f"GET {self.base_url}{path}")
        response = await self.client.get(path)
        if response.status_code != 200:
            logger.info(f"KEGG returned {response.status_code} for {path}")
            return None
        body = response.text
        return body if body.strip() else None


def _segment(value: str, safe: str = ":+") -> str:
    """Quote a value for use in a URL path."""
    return quote(str(value), safe=safe)
