"""Barcode product lookup with vegan, vegetarian and halal checks."""

__version__ = "0.1.0"

from .camera import BarcodeCamera, CaptureDevice
from .classifier import DietaryVerdict, classify, classify_text
from .config import CatalogConfig, DietScanConfig, ScannerConfig, load_config
from .errors import (
    DietScanError,
    InvalidBarcodeError,
    ProductLookupError,
    ProductNotFoundError,
)
from .lookup import ProductLookupService
from .models import Nutrients, ProductRecord, is_valid_barcode, validate_barcode
from .presenter import ProductPresenter
from .processing import describe
from .report import ProductReport
from .rules import CATEGORY_ORDER, RESTRICTED_INGREDIENTS, RestrictedIngredientSet
from .session import ScanSessionController, ScanState

__all__ = [
    "__version__",
    "BarcodeCamera",
    "CaptureDevice",
    "DietaryVerdict",
    "classify",
    "classify_text",
    "CatalogConfig",
    "DietScanConfig",
    "ScannerConfig",
    "load_config",
    "DietScanError",
    "InvalidBarcodeError",
    "ProductLookupError",
    "ProductNotFoundError",
    "ProductLookupService",
    "Nutrients",
    "ProductRecord",
    "is_valid_barcode",
    "validate_barcode",
    "ProductPresenter",
    "describe",
    "ProductReport",
    "CATEGORY_ORDER",
    "RESTRICTED_INGREDIENTS",
    "RestrictedIngredientSet",
    "ScanSessionController",
    "ScanState",
]
