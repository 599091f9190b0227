"""
==============================================================================
Catalog Package - Product Listings
==============================================================================

Product representation, stored-form codec and catalog operations.

Classes:
--------
- Product: decoded listing (domain entity)
- ProductCreate / ProductUpdate: validated write inputs
- CatalogService: list, fetch, search, filter, create, update, delete

Functions:
----------
- encode_images / decode_images
- encode_categories / decode_categories

==============================================================================
"""

from .models import Product, ProductCreate, ProductUpdate
from .codec import (
    decode_categories,
    decode_images,
    encode_categories,
    encode_images,
)
from .service import CatalogService

__all__ = [
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "CatalogService",
    "decode_categories",
    "decode_images",
    "encode_categories",
    "encode_images",
]
