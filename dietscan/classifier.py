"""Dietary suitability classification from an ingredients list."""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import ProductRecord
from .rules import CATEGORY_ORDER, RESTRICTED_INGREDIENTS, RestrictedIngredientSet


@dataclass(frozen=True)
class DietaryVerdict:
    """Per-category suitability for a product.

    ``reason`` names the matches of the first failing category in the order
    halal, vegan, vegetarian. ``violations`` keeps every category's matches.
    """

    vegan: bool
    vegetarian: bool
    halal: bool
    reason: str | None = None
    violations: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def suitable(self, category: str) -> bool:
        if category not in CATEGORY_ORDER:
            raise KeyError(category)
        return getattr(self, category)


def find_restricted(text: str, keywords: tuple[str, ...]) -> tuple[str, ...]:
    """Return keywords that occur anywhere in text (case-insensitive)."""
    lowered = text.lower()
    return tuple(k for k in keywords if k.lower() in lowered)


def classify_text(
    text: str | None, rules: RestrictedIngredientSet = RESTRICTED_INGREDIENTS
) -> DietaryVerdict:
    """Classify a raw ingredients string. ``None`` is treated as empty."""
    normalized = (text or "").lower()

    violations = {
        category: find_restricted(normalized, rules.for_category(category))
        for category in CATEGORY_ORDER
    }

    reason = None
    for category in CATEGORY_ORDER:
        matches = violations[category]
        if matches:
            reason = f"Contains: {', '.join(matches)}"
            break

    return DietaryVerdict(
        vegan=not violations["vegan"],
        vegetarian=not violations["vegetarian"],
        halal=not violations["halal"],
        reason=reason,
        violations=violations,
    )


def classify(
    record: ProductRecord | str | None,
    rules: RestrictedIngredientSet = RESTRICTED_INGREDIENTS,
) -> DietaryVerdict:
    """Classify a product record (only ``ingredients_text`` is read)."""
    if isinstance(record, ProductRecord):
        return classify_text(record.ingredients_text, rules)
    return classify_text(record, rules)
