"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides test database, fake object store, client and product fixtures.

==============================================================================
"""

import os

# Must be set before the application (and its settings singleton) is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["S3_BUCKET_NAME"] = "test-bucket"
os.environ["AWS_REGION"] = "us-east-1"

from typing import Callable, Dict, Generator, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from marketplace.catalog.codec import encode_categories, encode_images
from marketplace.core.exceptions import UploadError
from marketplace.db.database import Base, get_db
from marketplace.db.models import ProductRecord
from marketplace.main import app
from marketplace.storage.object_store import ObjectStore, get_object_store


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

# In-memory SQLite shared across threads for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


# ============================================================================
# OBJECT STORE FIXTURES
# ============================================================================

class FakeObjectStore(ObjectStore):
    """In-memory object store recording every write."""

    def __init__(self, bucket: str = "test-bucket", fail_on: Optional[str] = None):
        self.bucket = bucket
        self.fail_on = fail_on
        self.objects: Dict[str, bytes] = {}
        self.calls: List[str] = []

    def put_object(self, key, payload, content_type=None):
        self.calls.append(key)
        if self.fail_on and key.endswith(self.fail_on):
            raise UploadError(f"S3 upload error: failed to put object in S3: rejected {key}")
        self.objects[key] = payload
        return f"https://{self.bucket}.s3-us-east-1.amazonaws.com/{key}"


@pytest.fixture
def object_store() -> FakeObjectStore:
    """Fresh fake object store."""
    return FakeObjectStore()


@pytest.fixture(scope="function")
def client(db: Session, object_store: FakeObjectStore) -> Generator[TestClient, None, None]:
    """Create test client with database and object store overrides."""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_object_store] = lambda: object_store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# ============================================================================
# PRODUCT FIXTURES
# ============================================================================

@pytest.fixture
def make_product(db: Session) -> Callable[..., ProductRecord]:
    """Insert a product row directly, bypassing the service."""
    def _make(
        name: str = "Ceramic Mug",
        description: str = "A mug",
        price: float = 9.99,
        seller: str = "acme",
        images: Optional[List[str]] = None,
        categories: Optional[List[str]] = None,
    ) -> ProductRecord:
        record = ProductRecord(
            name=name,
            description=description,
            price=price,
            seller=seller,
            image_urls=encode_images(images or []),
            categories=encode_categories(categories or []),
        )
        db.add(record)
        db.commit()
        db.refresh(record)
        return record

    return _make


@pytest.fixture
def product_count(db: Session) -> Callable[[], int]:
    """Count rows in the products table."""
    return lambda: db.query(ProductRecord).count()
