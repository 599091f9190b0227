"""
==============================================================================
Utilities Package
==============================================================================

Modules:
--------
- validators: id, price and category input validation

==============================================================================
"""

from .validators import (
    CategoriesValidator,
    ItemIdValidator,
    PriceValidator,
    ProductFormParser,
)

__all__ = [
    "CategoriesValidator",
    "ItemIdValidator",
    "PriceValidator",
    "ProductFormParser",
]
