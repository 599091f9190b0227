"""
==============================================================================
SQLAlchemy ORM Models Module
==============================================================================

ORM mapping for the catalog store.

Database Schema:
---------------

    ┌─────────────────────────────────────────────────────────────────┐
    │                           products                               │
    ├─────────────────────────────────────────────────────────────────┤
    │ item_id (INTEGER, PK, AUTO INCREMENT)                           │
    │ item_name (VARCHAR, NOT NULL)                                   │
    │ item_desc (TEXT, NOT NULL)                                      │
    │ item_price (FLOAT, NOT NULL)                                    │
    │ seller (VARCHAR, NOT NULL, DEFAULT '')                          │
    │ image_url (TEXT, JSON array of locators, DEFAULT '[]')          │
    │ categories (TEXT, array literal e.g. {Kitchen,Home}, DEFAULT '{}')│
    │ created_at (DATETIME, DEFAULT now)                              │
    └─────────────────────────────────────────────────────────────────┘

The collection columns hold stored forms produced by
``marketplace.catalog.codec``; nothing else should write them.

=============================================================================
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime, Float, Integer, String, Text, func

from marketplace.db.database import Base


class ProductRecord(Base):
    """
    Row in the ``products`` table.

    Attributes:
        id: Store-assigned identifier
        name: Listing title
        description: Listing body text
        price: Non-negative price
        seller: Listing owner
        image_urls: Stored form of the image locator list
        categories: Stored form of the category label list
        created_at: Insert timestamp
    """

    __tablename__ = "products"

    id: int = Column(
        "item_id",
        Integer,
        primary_key=True,
        autoincrement=True,
        doc="Store-assigned product identifier"
    )

    name: str = Column(
        "item_name",
        String(255),
        nullable=False,
        index=True,
        doc="Listing title"
    )

    description: str = Column(
        "item_desc",
        Text,
        nullable=False,
        doc="Listing body text"
    )

    price: float = Column(
        "item_price",
        Float,
        nullable=False,
        doc="Non-negative price"
    )

    seller: str = Column(
        String(255),
        nullable=False,
        default="",
        doc="Listing owner"
    )

    image_urls: str = Column(
        "image_url",
        Text,
        nullable=False,
        default="[]",
        doc="JSON array text of image locators"
    )

    categories: str = Column(
        Text,
        nullable=False,
        default="{}",
        doc="Array literal text of category labels"
    )

    created_at: datetime = Column(
        DateTime,
        default=func.now(),
        nullable=False,
        doc="Insert timestamp"
    )

    def __repr__(self) -> str:
        return (
            f"ProductRecord(id={self.id!r}, "
            f"name={self.name!r}, "
            f"price={self.price!r})"
        )
