"""Open Food Facts product lookup."""

from __future__ import annotations

import logging

import httpx

from .config import DEFAULT_CATALOG_URL, DEFAULT_USER_AGENT, CatalogConfig
from .errors import ProductLookupError, ProductNotFoundError
from .models import ProductRecord

logger = logging.getLogger(__name__)

STATUS_FOUND = 1


class ProductLookupService:
    """Resolve barcodes against the Open Food Facts catalog.

    Each lookup issues exactly one request; failures are not retried and
    nothing is cached.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_CATALOG_URL,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=timeout,
            headers={
                "User-Agent": user_agent,
                "Accept": "application/json",
            },
        )

    @classmethod
    def from_config(cls, config: CatalogConfig) -> ProductLookupService:
        return cls(
            base_url=config.base_url,
            timeout=config.timeout,
            user_agent=config.user_agent,
        )

    async def __aenter__(self) -> ProductLookupService:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the httpx client if this service created it."""
        if self._owns_client:
            await self.client.aclose()

    def product_url(self, barcode: str) -> str:
        return f"{self._base_url}/api/v0/product/{barcode}.json"

    async def lookup(self, barcode: str) -> ProductRecord:
        """Fetch the product for a barcode.

        Raises:
            ProductNotFoundError: The catalog has no product for the barcode.
            ProductLookupError: Network failure, timeout, or a malformed
                response.
        """
        url = self.product_url(barcode)
        logger.debug("Looking up %s", url)

        try:
            response = await self.client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Catalog request failed for %s: %s", barcode, e)
            raise ProductLookupError(
                f"Error fetching product {barcode}: {e}"
            ) from e

        if response.status_code == 404:
            raise ProductNotFoundError(barcode)

        try:
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise ProductLookupError(
                f"Catalog returned HTTP {response.status_code} for {barcode}"
            ) from e
        except ValueError as e:
            raise ProductLookupError(
                f"Malformed catalog response for {barcode}"
            ) from e

        if not isinstance(data, dict):
            raise ProductLookupError(
                f"Malformed catalog response for {barcode}: expected an object"
            )

        if data.get("status") != STATUS_FOUND or isinstance(
            data.get("status"), bool
        ):
            logger.info("No product for barcode %s", barcode)
            raise ProductNotFoundError(barcode)

        product = data.get("product")
        if not isinstance(product, dict):
            raise ProductLookupError(
                f"Malformed catalog response for {barcode}: missing product"
            )

        record = ProductRecord.from_payload(product)
        logger.info("Resolved %s: %s", barcode, record.name or "(unnamed)")
        return record
