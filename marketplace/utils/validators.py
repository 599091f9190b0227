"""
==============================================================================
Validation Utilities Module
==============================================================================

Validators for raw text input arriving through forms, paths and queries.

This module implements:
- ItemIdValidator: positive integer identifiers
- PriceValidator: finite, non-negative prices
- CategoriesValidator: JSON array of category labels
- ProductFormParser: multipart create form → ProductCreate

Each validator returns a tuple instead of raising so callers decide how
to surface the problem; ProductFormParser raises ValidationError.

==============================================================================
"""

from __future__ import annotations

import json
import math
from typing import List, Optional, Tuple

from marketplace.catalog.models import ProductCreate
from marketplace.core.exceptions import ValidationError


class ItemIdValidator:
    """
    Validator for product identifiers received as text.

    Example:
        >>> ItemIdValidator().validate("42")
        (True, 42, None)
        >>> ItemIdValidator().validate("abc")
        (False, None, 'Invalid item ID')
    """

    def __init__(self, message: str = "Invalid item ID") -> None:
        self._message = message

    def validate(self, raw: Optional[str]) -> Tuple[bool, Optional[int], Optional[str]]:
        """
        Parse an identifier.

        Returns:
            Tuple of (is_valid, item_id, error_message)
        """
        if raw is None:
            return False, None, self._message

        raw = raw.strip()
        if not raw.isdecimal():
            return False, None, self._message

        item_id = int(raw)
        if item_id <= 0:
            return False, None, self._message

        return True, item_id, None


class PriceValidator:
    """
    Validator for prices received as text.

    Rejects blank, non-numeric, infinite, NaN and negative values.
    """

    MESSAGE = "Invalid item price"

    def validate(self, raw: Optional[str]) -> Tuple[bool, Optional[float], Optional[str]]:
        """
        Parse a price.

        Returns:
            Tuple of (is_valid, price, error_message)
        """
        if raw is None or not raw.strip():
            return False, None, self.MESSAGE

        try:
            price = float(raw.strip())
        except ValueError:
            return False, None, self.MESSAGE

        if not math.isfinite(price) or price < 0:
            return False, None, self.MESSAGE

        return True, price, None


class CategoriesValidator:
    """
    Validator for the ``categories`` form field.

    The field carries a JSON array of labels, e.g. '["Kitchen", "Home"]'.
    A missing or blank field means no categories. Labels are trimmed and
    must not be blank.
    """

    PREFIX = "Invalid categories format"

    def validate(self, raw: Optional[str]) -> Tuple[bool, Optional[List[str]], Optional[str]]:
        """
        Parse the category list.

        Returns:
            Tuple of (is_valid, labels, error_message)
        """
        if raw is None or not raw.strip():
            return True, [], None

        try:
            value = json.loads(raw)
        except json.JSONDecodeError as e:
            return False, None, f"{self.PREFIX}: {e}"

        if not isinstance(value, list):
            return False, None, f"{self.PREFIX}: expected a JSON array"

        labels = []
        for item in value:
            if not isinstance(item, str):
                return False, None, f"{self.PREFIX}: labels must be strings"
            label = item.strip()
            if not label:
                return False, None, f"{self.PREFIX}: labels cannot be blank"
            labels.append(label)

        return True, labels, None


class ProductFormParser:
    """
    Turns the multipart create form into a ProductCreate.

    Example:
        >>> parser = ProductFormParser()
        >>> data = parser.parse(
        ...     item_name="Mug", item_desc="Ceramic mug",
        ...     item_price="9.99", item_seller="acme", categories='["Kitchen"]'
        ... )
        >>> data.price
        9.99
    """

    def __init__(self) -> None:
        self._price_validator = PriceValidator()
        self._categories_validator = CategoriesValidator()

    @staticmethod
    def _required(value: Optional[str], field: str) -> str:
        if value is None or not value.strip():
            raise ValidationError(f"Missing required field: {field}", details={"field": field})
        return value.strip()

    def parse(
        self,
        item_name: Optional[str],
        item_desc: Optional[str],
        item_price: Optional[str],
        item_seller: Optional[str] = None,
        categories: Optional[str] = None
    ) -> ProductCreate:
        """
        Validate form fields.

        Raises:
            ValidationError: On the first invalid field
        """
        name = self._required(item_name, "item_name")
        description = self._required(item_desc, "item_desc")

        is_valid, price, error = self._price_validator.validate(item_price)
        if not is_valid:
            raise ValidationError(error, details={"field": "item_price"})

        is_valid, labels, error = self._categories_validator.validate(categories)
        if not is_valid:
            raise ValidationError(error, details={"field": "categories"})

        seller = (item_seller or "").strip()

        if len(name) > 255:
            raise ValidationError("Item name is too long", details={"field": "item_name"})
        if len(seller) > 255:
            raise ValidationError("Item seller is too long", details={"field": "item_seller"})

        return ProductCreate(
            name=name,
            description=description,
            price=price,
            seller=seller,
            categories=labels,
        )
