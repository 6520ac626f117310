"""Tests for product records and barcode validation."""

import pytest

from dietscan.errors import InvalidBarcodeError
from dietscan.models import Nutrients, ProductRecord, is_valid_barcode, validate_barcode


class TestBarcode:
    @pytest.mark.parametrize("value", ["0", "012345678905", "5449000000996"])
    def test_valid(self, value):
        assert is_valid_barcode(value)
        assert validate_barcode(value) == value

    @pytest.mark.parametrize("value", ["", "abc123", "12 34", "123a", " 123", "١٢٣", None])
    def test_invalid(self, value):
        assert not is_valid_barcode(value)

    def test_validate_raises(self):
        with pytest.raises(InvalidBarcodeError, match="abc"):
            validate_barcode("abc")

    def test_invalid_barcode_is_value_error(self):
        with pytest.raises(ValueError):
            validate_barcode("12-34")


class TestNutrients:
    def test_absent_is_none(self):
        n = Nutrients.from_nutriments({"energy_100g": 52})
        assert n.energy == 52.0
        assert n.proteins is None
        assert n.sugars is None

    def test_zero_preserved(self):
        n = Nutrients.from_nutriments({"fat_100g": 0})
        assert n.fat == 0.0
        assert n.fat is not None

    def test_numeric_string_accepted(self):
        n = Nutrients.from_nutriments({"sodium_100g": "0.25", "fiber_100g": "n/a"})
        assert n.sodium == 0.25
        assert n.fiber is None

    def test_not_a_mapping(self):
        assert Nutrients.from_nutriments(None) == Nutrients()
        assert Nutrients.from_nutriments([1, 2]) == Nutrients()

    def test_reported_skips_absent(self):
        n = Nutrients(energy=100.0, fat=0.0)
        assert list(n.reported()) == [("energy", 100.0), ("fat", 0.0)]


class TestProductRecord:
    def test_from_full_payload(self, full_payload):
        record = ProductRecord.from_payload(full_payload["product"])
        assert record.name == "Coca-Cola"
        assert record.ingredients_text.startswith("Carbonated water")
        assert record.ingredients_analysis_tags == (
            "en:palm-oil-free",
            "en:vegan",
            "en:vegetarian",
        )
        assert record.labels_tags == frozenset({"en:green-dot"})
        assert record.processing_group == 4
        assert record.image_url.endswith("front_en.jpg")
        assert record.nutrients.energy == 180.0
        assert record.nutrients.proteins == 0.0
        assert record.nutrients.sugars == 10.6

    def test_minimal_payload_keeps_absence(self):
        record = ProductRecord.from_payload({"product_name": "Plain"})
        assert record.name == "Plain"
        assert record.ingredients_text is None
        assert record.ingredients_analysis_tags is None
        assert record.labels_tags is None
        assert record.processing_group is None
        assert record.image_url is None
        assert record.nutrients == Nutrients()

    def test_missing_name_is_empty(self):
        assert ProductRecord.from_payload({}).name == ""

    def test_empty_labels_not_absent(self):
        record = ProductRecord.from_payload({"labels_tags": []})
        assert record.labels_tags == frozenset()

    def test_nova_group_coercion(self):
        assert ProductRecord.from_payload({"nova_group": "3"}).processing_group == 3
        assert ProductRecord.from_payload({"nova_group": 2.0}).processing_group == 2
        assert ProductRecord.from_payload({"nova_group": "x"}).processing_group is None

    @pytest.mark.parametrize("value", ["²", "①", "٣", " 4x", ""])
    def test_nova_group_non_ascii_digits(self, value):
        assert ProductRecord.from_payload({"nova_group": value}).processing_group is None

    def test_record_is_immutable(self):
        record = ProductRecord(name="A")
        with pytest.raises(AttributeError):
            record.name = "B"
