"""
==============================================================================
Storage Package - Image Uploads
==============================================================================

Object store client and the ingestion pipeline that feeds it.

Classes:
--------
- ObjectStore: abstract payload/key store
- S3ObjectStore: boto3 implementation
- IngestionPipeline: ordered multi-file upload

==============================================================================
"""

from .object_store import (
    ObjectStore,
    S3ObjectStore,
    UnconfiguredObjectStore,
    build_object_store,
    get_object_store,
)
from .ingestion import IngestionPipeline

__all__ = [
    "ObjectStore",
    "S3ObjectStore",
    "UnconfiguredObjectStore",
    "build_object_store",
    "get_object_store",
    "IngestionPipeline",
]
