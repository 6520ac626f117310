"""UI-facing product state with last-write-wins lookups."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from .errors import InvalidBarcodeError, ProductLookupError, ProductNotFoundError
from .models import ProductRecord, validate_barcode
from .report import ProductReport

logger = logging.getLogger(__name__)

INVALID_BARCODE_MESSAGE = "Please enter a valid numeric barcode"
NOT_FOUND_MESSAGE = "Product not found"
LOOKUP_ERROR_MESSAGE = "Error fetching product information"


class ProductPresenter:
    """Hold the product slot shown to the user.

    Every ``submit`` takes a new request token; a lookup that resolves after
    a newer one has started is discarded.
    """

    def __init__(self, lookup: Callable[[str], Awaitable[ProductRecord]]) -> None:
        self._lookup = lookup
        self._token = 0
        self.product: ProductReport | None = None
        self.error: str | None = None
        self.loading = False
        self.barcode: str | None = None

    async def submit(self, raw: str) -> ProductReport | None:
        """Validate and look up a barcode, updating the displayed state.

        Returns the report when this request's result was applied.
        """
        code = raw.strip()
        try:
            validate_barcode(code)
        except InvalidBarcodeError:
            logger.info("Rejected barcode input %r", raw)
            self._token += 1
            self._show_error(INVALID_BARCODE_MESSAGE)
            return None

        self._token += 1
        token = self._token
        self.barcode = code
        self.loading = True
        self.error = None

        try:
            record = await self._lookup(code)
        except ProductNotFoundError:
            if token == self._token:
                self._show_error(NOT_FOUND_MESSAGE)
            return None
        except ProductLookupError:
            if token == self._token:
                self._show_error(LOOKUP_ERROR_MESSAGE)
            return None

        if token != self._token:
            logger.debug("Discarding stale result for %s", code)
            return None

        self.product = ProductReport(barcode=code, record=record)
        self.loading = False
        return self.product

    def _show_error(self, message: str) -> None:
        self.product = None
        self.error = message
        self.loading = False
