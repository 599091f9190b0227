"""
==============================================================================
Attribute Codec Module
==============================================================================

Translation between in-memory product collections and their stored forms.

Stored Forms:
------------
- images:      JSON array text          '["https://a", "https://b"]'
- categories:  array literal text       '{Kitchen,Home}'

Empty Sentinels:
---------------
NULL, '', '[]' and '{}' all decode to an empty list for either column,
matching rows written by older deployments that left the columns unset.

Known Limitation:
----------------
Category decoding is a naive split: the enclosing braces are trimmed, the
text is split on ',' and each piece is whitespace-trimmed; blank pieces
are dropped, so '{ }' reads as no labels. A label that
itself contains a comma or brace is corrupted on the way back. Existing
rows were written in this form, so the behavior is kept.

==============================================================================
"""

from __future__ import annotations

import json
from typing import Iterable, List, Optional

from marketplace.core.exceptions import DecodeError


EMPTY_SENTINELS = frozenset({"", "[]", "{}"})


# =============================================================================
# IMAGES
# =============================================================================

def encode_images(locators: Iterable[str]) -> str:
    """
    Encode image locators as JSON array text.

    Args:
        locators: Ordered locator URLs

    Returns:
        JSON array text; '[]' for no locators
    """
    return json.dumps(list(locators))


def decode_images(stored: Optional[str]) -> List[str]:
    """
    Decode the stored image column back into an ordered locator list.

    Args:
        stored: Column value as read from the store

    Returns:
        List of locator strings

    Raises:
        DecodeError: If the text is not a JSON array of strings
    """
    if stored is None:
        return []

    if not isinstance(stored, str):
        raise DecodeError(
            f"Failed to unmarshal image URLs: expected text, got {type(stored).__name__}"
        )

    if stored.strip() in EMPTY_SENTINELS:
        return []

    try:
        value = json.loads(stored)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Failed to unmarshal image URLs: {e}") from e

    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise DecodeError("Failed to unmarshal image URLs: expected an array of strings")

    return value


# =============================================================================
# CATEGORIES
# =============================================================================

def encode_categories(labels: Iterable[str]) -> str:
    """
    Encode category labels as array literal text.

    Args:
        labels: Category labels

    Returns:
        Text such as '{Kitchen,Home}'; '{}' for no labels
    """
    return "{" + ",".join(labels) + "}"


def decode_categories(stored: Optional[str]) -> List[str]:
    """
    Decode the stored categories column into a list of labels.

    Args:
        stored: Column value as read from the store

    Returns:
        List of category labels

    Raises:
        DecodeError: If the stored value is not text
    """
    if stored is None:
        return []

    if not isinstance(stored, str):
        raise DecodeError(
            f"Failed to parse categories: expected text, got {type(stored).__name__}"
        )

    if stored.strip() in EMPTY_SENTINELS:
        return []

    inner = stored.strip().strip("{}")
    labels = (label.strip() for label in inner.split(","))
    return [label for label in labels if label]
