"""Shared fixtures: catalog payloads."""

import pytest


@pytest.fixture
def full_payload():
    return {
        "code": "5449000000996",
        "status": 1,
        "status_verbose": "product found",
        "product": {
            "product_name": "Coca-Cola",
            "ingredients_text": "Carbonated water, sugar, colour (caramel E150d), "
            "acid (phosphoric acid), natural flavourings including caffeine",
            "ingredients_analysis_tags": [
                "en:palm-oil-free",
                "en:vegan",
                "en:vegetarian",
            ],
            "labels_tags": ["en:green-dot"],
            "nova_group": 4,
            "image_url": "https://images.openfoodfacts.org/images/products/544/900/000/0996/front_en.jpg",
            "nutriments": {
                "energy_100g": 180,
                "proteins_100g": 0,
                "carbohydrates_100g": 10.6,
                "fat_100g": 0,
                "fiber_100g": 0,
                "sodium_100g": 0,
                "sugars_100g": 10.6,
            },
        },
    }
