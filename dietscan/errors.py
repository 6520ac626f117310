"""Exception types raised while resolving a barcode."""

from __future__ import annotations


class DietScanError(Exception):
    """Base class for recoverable dietscan failures."""


class InvalidBarcodeError(DietScanError, ValueError):
    """The manual input or decoded value is not an all-digit barcode."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid barcode: {value!r}")
        self.value = value


class ProductNotFoundError(DietScanError):
    """The catalog answered, but has no product for the barcode."""

    def __init__(self, barcode: str) -> None:
        super().__init__(f"Product not found: {barcode}")
        self.barcode = barcode


class ProductLookupError(DietScanError):
    """Transport failure, timeout, or malformed catalog response."""
