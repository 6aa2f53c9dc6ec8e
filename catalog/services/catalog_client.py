"""Catalog Client - HTTP client for the product API.

Used by the views to fetch products. Failures never raise past the client:
every call returns a FetchResult whose status tells the caller whether to
show data, a "not found" notice, or an error message.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from urllib.parse import quote

import httpx

from catalog.config import settings
from catalog.infra.logging import get_logger

logger = get_logger(__name__)

Record = dict[str, Any]


class FetchStatus(str, Enum):
    """Outcome of a fetch."""

    OK = "ok"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class FetchResult:
    """Result of a product fetch.

    Attributes:
        status: OK, NOT_FOUND or ERROR
        records: Product records as decoded from JSON (list endpoints)
        record: Single product record (detail endpoint)
        total: Total reported by the API, or len(records)
        message: User-facing message when status is not OK
    """

    status: FetchStatus
    records: list[Record] = field(default_factory=list)
    record: Record | None = None
    total: int = 0
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.OK

    @property
    def not_found(self) -> bool:
        return self.status is FetchStatus.NOT_FOUND

    @classmethod
    def error(cls, message: str) -> "FetchResult":
        return cls(status=FetchStatus.ERROR, message=message)


class MalformedResponseError(ValueError):
    """Raised internally when the API body does not have the expected shape."""


class CatalogClient:
    """HTTP client for the product catalog API."""

    LIST_ERROR_MESSAGE = "Gagal mengambil data produk"
    DETAIL_ERROR_MESSAGE = "Gagal mengambil detail produk"
    NOT_FOUND_MESSAGE = "Produk tidak ditemukan"

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        """Initialize catalog client.

        Args:
            base_url: API base URL (defaults to settings)
            timeout: Request timeout in seconds (defaults to settings)
        """
        self.base_url = base_url or settings.api_base_url
        self.timeout = timeout if timeout is not None else settings.api_timeout
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"Accept": "application/json"},
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def list_products(self) -> FetchResult:
        """Fetch the full product list from GET /api/products."""
        return await self._fetch_list("/api/products")

    async def search_products(self, keyword: str) -> FetchResult:
        """Fetch server-side search results from GET /api/products/search/{keyword}.

        Results are ordered by stock descending by the server.
        """
        return await self._fetch_list(f"/api/products/search/{quote(keyword, safe='')}")

    async def get_product(self, product_id: int) -> FetchResult:
        """Fetch a single product from GET /api/products/{product_id}.

        Returns:
            OK with `record` set, NOT_FOUND when the API answers 404 with its
            error envelope, ERROR otherwise (including a bare 404 from a
            wrong base URL)
        """
        path = f"/api/products/{product_id}"

        try:
            client = await self._get_client()
            response = await client.get(path)
            if response.status_code == httpx.codes.NOT_FOUND and self._is_failure_envelope(response):
                logger.info("Product not found", product_id=product_id)
                return FetchResult(status=FetchStatus.NOT_FOUND, message=self.NOT_FOUND_MESSAGE)
            response.raise_for_status()

            body = self._decode(response)
            record = body.get("data")
            if not isinstance(record, dict):
                raise MalformedResponseError("detail response has no product object")

            return FetchResult(status=FetchStatus.OK, record=record, total=1)

        except httpx.HTTPStatusError as e:
            logger.error(
                "Catalog API returned error",
                path=path,
                status_code=e.response.status_code,
                response_text=e.response.text[:500],
            )
            return FetchResult.error(self.DETAIL_ERROR_MESSAGE)

        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Failed to reach catalog API", path=path, error=str(e))
            return FetchResult.error(self.DETAIL_ERROR_MESSAGE)

        except ValueError as e:
            logger.error("Malformed catalog API response", path=path, error=str(e))
            return FetchResult.error(self.DETAIL_ERROR_MESSAGE)

    async def _fetch_list(self, path: str) -> FetchResult:
        try:
            client = await self._get_client()
            response = await client.get(path)
            response.raise_for_status()

            body = self._decode(response)
            records = self._extract_records(body)
            total = body.get("total") if isinstance(body, dict) else None
            if not isinstance(total, int):
                total = len(records)

            logger.info("Products fetched", path=path, count=len(records))
            return FetchResult(status=FetchStatus.OK, records=records, total=total)

        except httpx.HTTPStatusError as e:
            logger.error(
                "Catalog API returned error",
                path=path,
                status_code=e.response.status_code,
                response_text=e.response.text[:500],
            )
            return FetchResult.error(self.LIST_ERROR_MESSAGE)

        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Failed to reach catalog API", path=path, error=str(e))
            return FetchResult.error(self.LIST_ERROR_MESSAGE)

        except ValueError as e:
            logger.error("Malformed catalog API response", path=path, error=str(e))
            return FetchResult.error(self.LIST_ERROR_MESSAGE)

    @staticmethod
    def _is_failure_envelope(response: httpx.Response) -> bool:
        """True if the body is the API's own {success: false} envelope."""
        try:
            body = response.json()
        except ValueError:
            return False
        return isinstance(body, dict) and body.get("success") is False

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        """Decode the JSON body, rejecting envelopes flagged as failures."""
        body = response.json()
        if isinstance(body, dict) and body.get("success") is False:
            raise MalformedResponseError(body.get("message") or "API reported failure")
        return body

    @staticmethod
    def _extract_records(body: Any) -> list[Record]:
        """Pull the record list out of an envelope or a bare JSON array."""
        data = body.get("data") if isinstance(body, dict) else body
        if not isinstance(data, list):
            raise MalformedResponseError("list response has no data array")
        if not all(isinstance(item, dict) for item in data):
            raise MalformedResponseError("list response contains non-object items")
        return data


# Singleton instance
_catalog_client: CatalogClient | None = None


def get_catalog_client() -> CatalogClient:
    """Get or create catalog client singleton."""
    global _catalog_client
    if _catalog_client is None:
        _catalog_client = CatalogClient()
    return _catalog_client
