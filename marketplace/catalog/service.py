"""
==============================================================================
Catalog Service Module
==============================================================================

Request-level catalog operations over the products table.

This module implements:
- CatalogService: list, fetch, search, category filter, create, update,
  delete

Read Path:
---------
    ProductRecord ──decode_images / decode_categories──▶ Product

Any row whose stored collections fail to decode aborts the whole call
with DecodeError; partial results are never returned.

Write Path (create):
-------------------
    attachments ──IngestionPipeline──▶ locators
    ProductCreate + locators ──encode──▶ INSERT ──▶ Product (echo)

Store Failures:
--------------
SQLAlchemy errors are rolled back and re-raised as StoreError with the
driver message. Nothing is retried here; pool behavior lives in
DatabaseManager.

==============================================================================
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from marketplace.catalog.codec import (
    decode_categories,
    decode_images,
    encode_categories,
    encode_images,
)
from marketplace.catalog.models import Product, ProductCreate, ProductUpdate
from marketplace.core import exceptions
from marketplace.core.exceptions import DecodeError, ValidationError
from marketplace.db.models import ProductRecord
from marketplace.storage.ingestion import Attachment, IngestionPipeline


# Module logger
logger = logging.getLogger(__name__)


class CatalogService:
    """
    Service for catalog listing operations.

    Both collaborators are injected: the request-scoped session and,
    for create, the ingestion pipeline.

    Attributes:
        _db: Database session
        _pipeline: Ingestion pipeline (required only for create)

    Example:
        >>> service = CatalogService(db_session, IngestionPipeline(store))
        >>> product = service.create_product(data, files)
        >>> service.search_by_name("mug")
        [Product(id=1, name='Ceramic Mug', ...)]
    """

    def __init__(
        self,
        db: Session,
        pipeline: Optional[IngestionPipeline] = None
    ) -> None:
        self._db = db
        self._pipeline = pipeline

    # =========================================================================
    # HELPERS
    # =========================================================================

    @contextmanager
    def _store_errors(self, action: str) -> Iterator[None]:
        """Translate SQLAlchemy failures into StoreError after rollback."""
        try:
            yield
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"Database {action} failed: {e}")
            raise exceptions.store_failure(action, e) from e

    @staticmethod
    def _to_product(record: ProductRecord) -> Product:
        """
        Materialize a domain Product from a row.

        Raises:
            DecodeError: If stored collections or scalars are corrupt
        """
        images = decode_images(record.image_urls)
        categories = decode_categories(record.categories)

        try:
            return Product(
                id=record.id,
                name=record.name,
                description=record.description,
                price=record.price,
                seller=record.seller or "",
                images=images,
                categories=categories,
            )
        except PydanticValidationError as e:
            raise DecodeError(
                f"Stored product {record.id} is invalid: {e.errors()[0]['msg']}",
                details={"item_id": record.id}
            ) from e

    def _decode_all(self, records: Sequence[ProductRecord]) -> List[Product]:
        return [self._to_product(record) for record in records]

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def list_products(self) -> List[Product]:
        """
        List every product, newest first.

        Returns:
            Products ordered by id descending

        Raises:
            DecodeError: If any row is corrupt
            StoreError: On database failure
        """
        with self._store_errors("query"):
            records = (
                self._db.query(ProductRecord)
                .order_by(ProductRecord.id.desc())
                .all()
            )

        return self._decode_all(records)

    def get_product(self, item_id: int) -> Product:
        """
        Fetch one product.

        Raises:
            NotFoundError: If no row has this id
            DecodeError: If the row is corrupt
            StoreError: On database failure
        """
        with self._store_errors("query"):
            record = self._db.get(ProductRecord, item_id)

        if record is None:
            logger.warning(f"Product not found: {item_id}")
            raise exceptions.product_not_found(item_id)

        return self._to_product(record)

    def search_by_name(self, fragment: Optional[str]) -> List[Product]:
        """
        Case-insensitive substring search on product names.

        An empty fragment matches every product. Wildcard characters in
        the fragment are matched literally.

        Raises:
            ValidationError: If the fragment is absent
        """
        if fragment is None:
            raise ValidationError("Search term is required", details={"field": "name"})

        with self._store_errors("query"):
            query = self._db.query(ProductRecord)
            if fragment:
                query = query.filter(
                    func.lower(ProductRecord.name).contains(fragment.lower(), autoescape=True)
                )
            records = query.order_by(ProductRecord.id.desc()).all()

        return self._decode_all(records)

    def filter_by_category(self, label: Optional[str]) -> List[Product]:
        """
        Products whose category set contains ``label``, ignoring case.

        Membership is tested on decoded labels, so matching follows the
        same split rules as every other read path.

        Raises:
            ValidationError: If the label is absent or blank
        """
        if label is None or not label.strip():
            raise ValidationError("Category is required", details={"field": "category"})

        return [product for product in self.list_products() if product.in_category(label)]

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    def create_product(
        self,
        data: ProductCreate,
        attachments: Optional[Sequence[Attachment]]
    ) -> Product:
        """
        Upload attachments and insert a new listing.

        Args:
            data: Validated listing fields
            attachments: Uploaded image files (at least one)

        Returns:
            Product with the store-assigned id and the submitted fields

        Raises:
            ValidationError: If there are no attachments
            UploadError: If any upload fails (no row is written)
            StoreError: If the insert fails (uploaded objects remain)
        """
        if self._pipeline is None:
            raise exceptions.internal_error("Catalog service has no ingestion pipeline")

        locators = self._pipeline.ingest(attachments)

        record = ProductRecord(
            name=data.name,
            description=data.description,
            price=data.price,
            seller=data.seller,
            image_urls=encode_images(locators),
            categories=encode_categories(data.categories),
        )

        with self._store_errors("insert"):
            self._db.add(record)
            self._db.commit()
            self._db.refresh(record)

        logger.info(f"✅ Product created: {record.id} ({data.name!r}, {len(locators)} images)")

        return Product(
            id=record.id,
            name=data.name,
            description=data.description,
            price=data.price,
            seller=data.seller,
            images=locators,
            categories=list(data.categories),
        )

    def update_product(self, data: ProductUpdate) -> Product:
        """
        Replace every mutable field of an existing listing.

        Images are never touched. No row is created when the id is
        unknown.

        Returns:
            The listing as stored after the update

        Raises:
            NotFoundError: If no row has this id
            StoreError: On database failure
        """
        with self._store_errors("update"):
            matched = (
                self._db.query(ProductRecord)
                .filter(ProductRecord.id == data.id)
                .update(
                    {
                        ProductRecord.name: data.name,
                        ProductRecord.description: data.description,
                        ProductRecord.price: data.price,
                        ProductRecord.seller: data.seller,
                        ProductRecord.categories: encode_categories(data.categories),
                    },
                    synchronize_session=False,
                )
            )
            self._db.commit()

        if matched == 0:
            logger.warning(f"Update skipped, item not found: {data.id}")
            raise exceptions.item_not_found(data.id)

        logger.info(f"✅ Product updated: {data.id}")
        self._db.expire_all()
        return self.get_product(data.id)

    def delete_product(self, item_id: int) -> None:
        """
        Permanently delete a listing.

        Raises:
            NotFoundError: If no row has this id
            StoreError: On database failure
        """
        with self._store_errors("delete"):
            deleted = (
                self._db.query(ProductRecord)
                .filter(ProductRecord.id == item_id)
                .delete(synchronize_session=False)
            )
            self._db.commit()

        if deleted == 0:
            logger.warning(f"Delete skipped, item not found: {item_id}")
            raise exceptions.item_not_found(item_id)

        logger.warning(f"⚠️ Product permanently deleted: {item_id}")
