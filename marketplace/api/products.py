"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Endpoints for listing, searching, creating, updating and deleting
product listings.

Routes:
-------
    GET    /                         list all products (newest first)
    GET    /product/{item_id}        fetch one product
    GET    /search/product/{name}    case-insensitive name substring search
    GET    /category/{category}      case-insensitive category filter
    POST   /upload                   multipart create (files + item_* fields)
    PUT    /update                   JSON full replacement (no images)
    DELETE /delete?id=<id>           delete by id

Handlers are plain ``def`` so FastAPI runs the blocking database and
object store calls in its thread pool.

==============================================================================
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy.orm import Session

from marketplace.catalog.service import CatalogService
from marketplace.config import get_settings
from marketplace.core import exceptions
from marketplace.db.database import get_db
from marketplace.schemas.common import MessageResponse
from marketplace.schemas.product import ProductResponse, ProductUpdateRequest
from marketplace.storage.ingestion import IngestionPipeline
from marketplace.storage.object_store import ObjectStore, get_object_store
from marketplace.utils.validators import ItemIdValidator, ProductFormParser


router = APIRouter(tags=["Products"])


class ProductController:
    """Controller for catalog operations."""

    def __init__(self, db: Session, store: Optional[ObjectStore] = None):
        pipeline = None
        if store is not None:
            pipeline = IngestionPipeline(store, key_prefix=get_settings().upload_key_prefix)
        self._service = CatalogService(db, pipeline)

    @staticmethod
    def _parse_id(raw: Optional[str], error) -> int:
        is_valid, item_id, _ = ItemIdValidator().validate(raw)
        if not is_valid:
            raise error(raw)
        return item_id

    def list_all(self) -> List[ProductResponse]:
        """List every product."""
        return [ProductResponse.from_product(p) for p in self._service.list_products()]

    def get(self, raw_id: str) -> ProductResponse:
        """Get product by id."""
        item_id = self._parse_id(raw_id, exceptions.invalid_product_id)
        return ProductResponse.from_product(self._service.get_product(item_id))

    def search(self, name: Optional[str]) -> List[ProductResponse]:
        """Search products by name fragment."""
        return [ProductResponse.from_product(p) for p in self._service.search_by_name(name)]

    def by_category(self, category: Optional[str]) -> List[ProductResponse]:
        """Filter products by category label."""
        return [ProductResponse.from_product(p) for p in self._service.filter_by_category(category)]

    def create(
        self,
        files: Optional[List[UploadFile]],
        item_name: Optional[str],
        item_desc: Optional[str],
        item_price: Optional[str],
        item_seller: Optional[str],
        categories: Optional[str]
    ) -> ProductResponse:
        """Validate form fields, upload images and insert the listing."""
        data = ProductFormParser().parse(
            item_name=item_name,
            item_desc=item_desc,
            item_price=item_price,
            item_seller=item_seller,
            categories=categories,
        )
        product = self._service.create_product(data, files)
        return ProductResponse.from_product(product)

    def update(self, request: ProductUpdateRequest) -> ProductResponse:
        """Replace every mutable field of a listing."""
        product = self._service.update_product(request.to_update())
        return ProductResponse.from_product(product)

    def delete(self, raw_id: Optional[str]) -> MessageResponse:
        """Delete a listing."""
        item_id = self._parse_id(raw_id, exceptions.invalid_item_id)
        self._service.delete_product(item_id)
        return MessageResponse(message="Item deleted")


@router.get("/", response_model=List[ProductResponse])
def list_products(db: Session = Depends(get_db)):
    """List all products, newest first."""
    controller = ProductController(db)
    return controller.list_all()


@router.get("/product/{item_id}", response_model=ProductResponse)
def get_product(item_id: str, db: Session = Depends(get_db)):
    """Get a product by id."""
    controller = ProductController(db)
    return controller.get(item_id)


@router.get("/search/product/{name}", response_model=List[ProductResponse])
def search_products(name: str, db: Session = Depends(get_db)):
    """Search products whose name contains the fragment (case-insensitive)."""
    controller = ProductController(db)
    return controller.search(name)


@router.get("/category/{category}", response_model=List[ProductResponse])
def products_by_category(category: str, db: Session = Depends(get_db)):
    """Get products tagged with the category (case-insensitive)."""
    controller = ProductController(db)
    return controller.by_category(category)


@router.post("/upload", response_model=ProductResponse)
def create_product(
    files: Optional[List[UploadFile]] = File(default=None),
    item_name: Optional[str] = Form(default=None),
    item_desc: Optional[str] = Form(default=None),
    item_price: Optional[str] = Form(default=None),
    item_seller: Optional[str] = Form(default=None),
    categories: Optional[str] = Form(default=None),
    db: Session = Depends(get_db),
    store: ObjectStore = Depends(get_object_store)
):
    """Create a product from a multipart form with one or more images."""
    controller = ProductController(db, store)
    return controller.create(files, item_name, item_desc, item_price, item_seller, categories)


@router.put("/update", response_model=ProductResponse)
def update_product(request: ProductUpdateRequest, db: Session = Depends(get_db)):
    """Replace name, description, price, seller and categories of a product."""
    controller = ProductController(db)
    return controller.update(request)


@router.delete("/delete", response_model=MessageResponse)
def delete_product(
    id: Optional[str] = Query(default=None),
    db: Session = Depends(get_db)
):
    """Delete a product by id."""
    controller = ProductController(db)
    return controller.delete(id)
