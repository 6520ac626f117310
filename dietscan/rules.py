"""Restricted ingredient keywords per dietary category."""

from __future__ import annotations

from dataclasses import dataclass

# Evaluation order for violation reasons.
CATEGORY_ORDER: tuple[str, ...] = ("halal", "vegan", "vegetarian")


@dataclass(frozen=True)
class RestrictedIngredientSet:
    """Lowercase keywords that disqualify a product from a category."""

    halal: tuple[str, ...]
    vegan: tuple[str, ...]
    vegetarian: tuple[str, ...]

    def for_category(self, category: str) -> tuple[str, ...]:
        if category not in CATEGORY_ORDER:
            raise KeyError(category)
        return getattr(self, category)


RESTRICTED_INGREDIENTS = RestrictedIngredientSet(
    halal=(
        "alcohol", "wine", "beer", "pork", "bacon", "ham", "gelatin", "lard",
        "pepsin", "carmine", "cochineal", "shellac", "vanilla extract",
    ),
    vegan=(
        "milk", "egg", "honey", "gelatin", "whey", "casein", "lactose", "meat",
        "fish", "shellfish", "royal jelly", "carmine", "isinglass", "lanolin",
    ),
    vegetarian=(
        "meat", "fish", "shellfish", "gelatin", "rennet", "carmine", "lard",
    ),
)
