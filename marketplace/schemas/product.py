"""
==============================================================================
Product Schemas Module
==============================================================================

Wire contract for product requests and responses.

Every product in every response uses the same field names:

    Item_id, Item_name, Item_desc, Item_price, Item_seller,
    image_url, categories

Request bodies use lowercase ``item_*`` names.

==============================================================================
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field, field_validator

from marketplace.catalog.models import Product, ProductUpdate


class ProductResponse(BaseModel):
    """Product as returned by every endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., alias="Item_id")
    name: str = Field(..., alias="Item_name")
    description: str = Field(..., alias="Item_desc")
    price: float = Field(..., alias="Item_price")
    seller: str = Field(..., alias="Item_seller")
    images: List[str] = Field(default_factory=list, alias="image_url")
    categories: List[str] = Field(default_factory=list, alias="categories")

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        """Create response from a persisted Product."""
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            seller=product.seller,
            images=list(product.images),
            categories=list(product.categories),
        )


class ProductUpdateRequest(BaseModel):
    """Body of PUT /update: full replacement of every mutable field."""

    item_id: int = Field(..., gt=0)
    item_name: str = Field(..., max_length=255)
    item_desc: str = Field(...)
    item_price: float = Field(..., ge=0, allow_inf_nan=False)
    item_seller: str = Field(default="", max_length=255)
    categories: List[str] = Field(default_factory=list)

    @field_validator("item_name", "item_desc")
    @classmethod
    def require_text(cls, v: str) -> str:
        """Same rule as the create form: required text cannot be blank."""
        v = v.strip()
        if not v:
            raise ValueError("Field cannot be blank")
        return v

    @field_validator("item_seller")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        return v.strip()

    @field_validator("categories")
    @classmethod
    def validate_categories(cls, v: List[str]) -> List[str]:
        labels = [label.strip() for label in v]
        if any(not label for label in labels):
            raise ValueError("Category labels cannot be blank")
        return labels

    def to_update(self) -> ProductUpdate:
        """Convert to the domain update model."""
        return ProductUpdate(
            id=self.item_id,
            name=self.item_name,
            description=self.item_desc,
            price=self.item_price,
            seller=self.item_seller,
            categories=self.categories,
        )
