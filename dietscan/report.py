"""Combined product verdict and its text rendering."""

from __future__ import annotations

from dataclasses import dataclass

from .classifier import DietaryVerdict, classify
from .models import ProductRecord
from .processing import describe
from .rules import CATEGORY_ORDER

_NUTRIENT_LABELS: dict[str, str] = {
    "energy": "Energy",
    "proteins": "Proteins",
    "carbohydrates": "Carbohydrates",
    "fat": "Fat",
    "fiber": "Fiber",
    "sodium": "Sodium",
    "sugars": "Sugars",
}


@dataclass(frozen=True)
class ProductReport:
    barcode: str
    record: ProductRecord

    @property
    def verdict(self) -> DietaryVerdict:
        return classify(self.record)

    @property
    def processing(self) -> str:
        return describe(self.record.processing_group)

    def ingredients(self) -> list[str]:
        """Split the ingredients text into its comma-separated items."""
        text = self.record.ingredients_text or ""
        return [item.strip() for item in text.split(",") if item.strip()]

    def dietary_lines(self) -> list[str]:
        verdict = self.verdict
        lines: list[str] = []
        for category in CATEGORY_ORDER:
            if verdict.suitable(category):
                lines.append(f"Suitable for {category} diet")
            else:
                lines.append(f"Not {category} - {verdict.reason}")
        return lines

    def to_dict(self) -> dict:
        record = self.record
        verdict = self.verdict
        return {
            "barcode": self.barcode,
            "name": record.name,
            "image_url": record.image_url,
            "ingredients_text": record.ingredients_text,
            "ingredients_analysis_tags": (
                list(record.ingredients_analysis_tags)
                if record.ingredients_analysis_tags is not None
                else None
            ),
            "labels_tags": (
                sorted(record.labels_tags)
                if record.labels_tags is not None
                else None
            ),
            "nova_group": record.processing_group,
            "processing": self.processing,
            "nutrients": dict(record.nutrients.reported()),
            "dietary": {
                "vegan": verdict.vegan,
                "vegetarian": verdict.vegetarian,
                "halal": verdict.halal,
                "reason": verdict.reason,
                "violations": {k: list(v) for k, v in verdict.violations.items()},
            },
        }

    def render(self) -> str:
        record = self.record
        lines = [record.name or "(unnamed product)", f"Barcode: {self.barcode}"]
        if record.image_url:
            lines.append(f"Image: {record.image_url}")

        lines.append("")
        lines.append("Dietary information:")
        lines.extend(f"  {line}" for line in self.dietary_lines())

        nutrients = list(record.nutrients.reported())
        if nutrients:
            lines.append("")
            lines.append("Nutrition facts (per 100g):")
            for key, amount in nutrients:
                unit = " kcal" if key == "energy" else "g"
                lines.append(f"  {_NUTRIENT_LABELS[key]:<14}{amount:g}{unit}")

        lines.append("")
        lines.append(f"Processing level: {self.processing}")

        ingredients = self.ingredients()
        if ingredients:
            lines.append("")
            lines.append("Ingredients:")
            lines.extend(f"  - {item}" for item in ingredients)

        if record.labels_tags:
            lines.append("")
            lines.append(f"Labels: {', '.join(sorted(record.labels_tags))}")

        return "\n".join(lines)
