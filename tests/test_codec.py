"""
==============================================================================
Attribute Codec Tests
==============================================================================

Tests for stored-form encoding of images and categories.

==============================================================================
"""

import pytest

from marketplace.catalog.codec import (
    decode_categories,
    decode_images,
    encode_categories,
    encode_images,
)
from marketplace.core.exceptions import DecodeError


class TestImageCodec:
    """Tests for image locator encoding."""

    @pytest.mark.parametrize("locators", [
        [],
        ["https://bucket.s3-us-east-1.amazonaws.com/uploads/1-a.png"],
        ["https://x/1", "https://x/2", "https://x/1"],
    ])
    def test_round_trip(self, locators):
        """Decoding an encoded list returns the same ordered list."""
        assert decode_images(encode_images(locators)) == locators

    def test_empty_encodes_to_sentinel(self):
        assert encode_images([]) == "[]"

    @pytest.mark.parametrize("stored", [None, "", "[]", "  []  "])
    def test_empty_sentinels_decode_to_empty_list(self, stored):
        assert decode_images(stored) == []

    @pytest.mark.parametrize("stored", ["not json", "{bad}", '{"a": 1}', "[1, 2]", '"https://x"'])
    def test_malformed_text_raises(self, stored):
        with pytest.raises(DecodeError) as exc_info:
            decode_images(stored)
        assert exc_info.value.status_code == 500

    def test_non_text_value_raises(self):
        with pytest.raises(DecodeError):
            decode_images(["https://x"])


class TestCategoryCodec:
    """Tests for category label encoding."""

    def test_encodes_array_literal(self):
        assert encode_categories(["Kitchen", "Home"]) == "{Kitchen,Home}"

    def test_empty_encodes_to_braces(self):
        assert encode_categories([]) == "{}"

    @pytest.mark.parametrize("labels", [
        [],
        ["Kitchen"],
        ["Kitchen", "Home Decor", "Gifts"],
    ])
    def test_round_trip(self, labels):
        assert decode_categories(encode_categories(labels)) == labels

    @pytest.mark.parametrize("stored", [None, "", "{}", "[]"])
    def test_empty_sentinels_decode_to_empty_list(self, stored):
        assert decode_categories(stored) == []

    def test_trims_whitespace_around_labels(self):
        assert decode_categories("{ Kitchen , Home }") == ["Kitchen", "Home"]

    def test_comma_inside_label_splits_it(self):
        """Labels containing commas do not survive the naive split."""
        stored = encode_categories(["Pots, Pans"])
        assert decode_categories(stored) == ["Pots", "Pans"]

    def test_non_text_value_raises(self):
        with pytest.raises(DecodeError):
            decode_categories(42)

    @pytest.mark.parametrize("stored", ["{ }", "  { }  ", "{,}"])
    def test_blank_literal_decodes_to_empty_list(self, stored):
        assert decode_categories(stored) == []

    def test_blank_pieces_are_dropped(self):
        assert decode_categories("{Kitchen,}") == ["Kitchen"]
        assert decode_categories("{Kitchen, ,Home}") == ["Kitchen", "Home"]
