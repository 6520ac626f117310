"""Product data returned by the catalog lookup."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from typing import Any, Iterator

from .errors import InvalidBarcodeError

_BARCODE_RE = re.compile(r"[0-9]+")


def is_valid_barcode(value: object) -> bool:
    """True if value is a non-empty string of ASCII digits."""
    return isinstance(value, str) and _BARCODE_RE.fullmatch(value) is not None


def validate_barcode(value: str) -> str:
    """Return value unchanged, or raise InvalidBarcodeError."""
    if not is_valid_barcode(value):
        raise InvalidBarcodeError(value)
    return value


@dataclass(frozen=True)
class Nutrients:
    """Nutrient amounts per 100g.

    ``None`` means the catalog did not report the nutrient; ``0.0`` is a
    reported zero.
    """

    energy: float | None = None
    proteins: float | None = None
    carbohydrates: float | None = None
    fat: float | None = None
    fiber: float | None = None
    sodium: float | None = None
    sugars: float | None = None

    @classmethod
    def from_nutriments(cls, raw: Any) -> Nutrients:
        """Build from a catalog ``nutriments`` mapping (``<key>_100g``)."""
        if not isinstance(raw, dict):
            return cls()
        values = {
            f.name: _to_number(raw.get(f"{f.name}_100g")) for f in fields(cls)
        }
        return cls(**values)

    def reported(self) -> Iterator[tuple[str, float]]:
        """Yield (key, amount) for reported nutrients only."""
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None:
                yield f.name, value


@dataclass(frozen=True)
class ProductRecord:
    """A product resolved from the catalog."""

    name: str
    ingredients_text: str | None = None
    ingredients_analysis_tags: tuple[str, ...] | None = None
    labels_tags: frozenset[str] | None = None
    processing_group: int | None = None
    image_url: str | None = None
    nutrients: Nutrients = field(default_factory=Nutrients)

    @classmethod
    def from_payload(cls, product: dict) -> ProductRecord:
        """Map a catalog ``product`` object, keeping absent fields absent."""
        analysis = _to_tags(product.get("ingredients_analysis_tags"))
        labels = _to_tags(product.get("labels_tags"))
        return cls(
            name=_to_str(product.get("product_name")) or "",
            ingredients_text=_to_str(product.get("ingredients_text")),
            ingredients_analysis_tags=analysis,
            labels_tags=frozenset(labels) if labels is not None else None,
            processing_group=_to_int(product.get("nova_group")),
            image_url=_to_str(product.get("image_url")),
            nutrients=Nutrients.from_nutriments(product.get("nutriments")),
        )


def _to_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _to_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        digits = value.strip()
        if digits.isascii() and digits.isdigit():
            return int(digits)
    return None


def _to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _to_tags(value: Any) -> tuple[str, ...] | None:
    if not isinstance(value, list):
        return None
    return tuple(v for v in value if isinstance(v, str))
