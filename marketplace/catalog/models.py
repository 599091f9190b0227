"""
==============================================================================
Product Models Module
==============================================================================

Pydantic domain models for catalog listings.

==============================================================================
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """
    Product listing with decoded collection attributes.

    ``id`` is None until the store assigns one on insert.

    Attributes:
        id: Store-assigned identifier
        name: Listing title
        description: Listing body text
        price: Non-negative price
        seller: Listing owner
        images: Ordered image locators
        categories: Category labels
    """

    model_config = ConfigDict(from_attributes=True)

    id: Optional[int] = Field(default=None, gt=0, description="Store-assigned id")
    name: str = Field(..., min_length=1, description="Listing title")
    description: str = Field(..., description="Listing body text")
    price: float = Field(..., ge=0, allow_inf_nan=False, description="Price")
    seller: str = Field(default="", description="Listing owner")
    images: List[str] = Field(default_factory=list, description="Image locators")
    categories: List[str] = Field(default_factory=list, description="Category labels")

    def in_category(self, label: str) -> bool:
        """Case-insensitive membership test against the category set."""
        wanted = label.strip().lower()
        return any(category.lower() == wanted for category in self.categories)


class ProductCreate(BaseModel):
    """Validated input for a new listing (images come from ingestion)."""

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(...)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    seller: str = Field(default="", max_length=255)
    categories: List[str] = Field(default_factory=list)


class ProductUpdate(BaseModel):
    """Full replacement field set for an existing listing; images excluded."""

    id: int = Field(..., gt=0)
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(...)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    seller: str = Field(default="", max_length=255)
    categories: List[str] = Field(default_factory=list)
