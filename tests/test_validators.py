"""
==============================================================================
Validator Tests
==============================================================================

Tests for id, price and category parsing and the create form parser.

==============================================================================
"""

import pytest

from marketplace.core.exceptions import ValidationError
from marketplace.utils.validators import (
    CategoriesValidator,
    ItemIdValidator,
    PriceValidator,
    ProductFormParser,
)


class TestItemIdValidator:
    """Tests for identifier parsing."""

    def test_valid_id(self):
        assert ItemIdValidator().validate(" 42 ") == (True, 42, None)

    @pytest.mark.parametrize("raw", [None, "", "abc", "-1", "0", "1.5", "4 2"])
    def test_invalid_id(self, raw):
        is_valid, item_id, error = ItemIdValidator().validate(raw)
        assert is_valid is False
        assert item_id is None
        assert error == "Invalid item ID"

    def test_custom_message(self):
        _, _, error = ItemIdValidator("Invalid product ID").validate("x")
        assert error == "Invalid product ID"


class TestPriceValidator:
    """Tests for price parsing."""

    @pytest.mark.parametrize("raw, expected", [("9.99", 9.99), ("0", 0.0), (" 12 ", 12.0)])
    def test_valid_price(self, raw, expected):
        assert PriceValidator().validate(raw) == (True, expected, None)

    @pytest.mark.parametrize("raw", [None, "", "abc", "-0.01", "nan", "inf"])
    def test_invalid_price(self, raw):
        is_valid, _, error = PriceValidator().validate(raw)
        assert is_valid is False
        assert error == "Invalid item price"


class TestCategoriesValidator:
    """Tests for the categories form field."""

    def test_valid_array(self):
        assert CategoriesValidator().validate('["Kitchen", " Home "]') == (True, ["Kitchen", "Home"], None)

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing_means_no_categories(self, raw):
        assert CategoriesValidator().validate(raw) == (True, [], None)

    @pytest.mark.parametrize("raw", ["Kitchen", '{"a": 1}', "[1]", '["ok", ""]'])
    def test_invalid_format(self, raw):
        is_valid, labels, error = CategoriesValidator().validate(raw)
        assert is_valid is False
        assert labels is None
        assert error.startswith("Invalid categories format")


class TestProductFormParser:
    """Tests for the create form parser."""

    def test_parses_complete_form(self):
        data = ProductFormParser().parse(
            item_name=" Mug ",
            item_desc="Ceramic mug",
            item_price="9.99",
            item_seller="acme",
            categories='["Kitchen"]',
        )
        assert data.name == "Mug"
        assert data.description == "Ceramic mug"
        assert data.price == 9.99
        assert data.seller == "acme"
        assert data.categories == ["Kitchen"]

    def test_seller_defaults_to_empty(self):
        data = ProductFormParser().parse("Mug", "Ceramic mug", "1")
        assert data.seller == ""
        assert data.categories == []

    @pytest.mark.parametrize("field", ["item_name", "item_desc"])
    def test_missing_required_field(self, field):
        fields = {"item_name": "Mug", "item_desc": "Ceramic mug", "item_price": "1"}
        fields[field] = "  "
        with pytest.raises(ValidationError) as exc_info:
            ProductFormParser().parse(**fields)
        assert exc_info.value.details["field"] == field

    def test_bad_price(self):
        with pytest.raises(ValidationError) as exc_info:
            ProductFormParser().parse("Mug", "Ceramic mug", "free")
        assert exc_info.value.message == "Invalid item price"
        assert exc_info.value.status_code == 400

    def test_bad_categories(self):
        with pytest.raises(ValidationError) as exc_info:
            ProductFormParser().parse("Mug", "Ceramic mug", "1", categories="Kitchen")
        assert exc_info.value.message.startswith("Invalid categories format")
