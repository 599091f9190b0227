"""
==============================================================================
Object Store Client Module
==============================================================================

Durable storage for uploaded product images.

This module implements:
- ObjectStore: abstract interface used by the ingestion pipeline
- S3ObjectStore: boto3-backed implementation
- UnconfiguredObjectStore: rejects every write when no bucket is set
- get_object_store: FastAPI dependency returning the configured store

Locator Format:
--------------
    https://{bucket}.s3-{region}.amazonaws.com/{key}

==============================================================================
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from marketplace.config import Settings, get_settings
from marketplace.core.exceptions import UploadError


# Module logger
logger = logging.getLogger(__name__)


class ObjectStore(ABC):
    """Abstract object store accepting a payload under a key."""

    @abstractmethod
    def put_object(
        self,
        key: str,
        payload: bytes,
        content_type: Optional[str] = None
    ) -> str:
        """
        Store ``payload`` under ``key``.

        Returns:
            Publicly resolvable locator URL

        Raises:
            UploadError: If the store rejects the write
        """


class S3ObjectStore(ObjectStore):
    """
    Object store backed by an S3 bucket.

    Static credentials are used when both keys are provided; otherwise
    boto3 falls back to its default credential chain.

    Example:
        >>> store = S3ObjectStore(bucket="shop-images", region="eu-west-1")
        >>> store.put_object("uploads/1700000000-mug.jpg", b"...")
        'https://shop-images.s3-eu-west-1.amazonaws.com/uploads/1700000000-mug.jpg'
    """

    def __init__(
        self,
        *,
        bucket: str,
        region: str,
        access_key_id: str = "",
        secret_access_key: str = "",
        client=None
    ) -> None:
        if not bucket:
            raise ValueError("S3 bucket name is required to initialize the object store")
        if not region:
            raise ValueError("AWS region must be provided")

        self._bucket = bucket
        self._region = region

        if client is not None:
            self._client = client
        elif access_key_id and secret_access_key:
            self._client = boto3.client(
                "s3",
                region_name=region,
                aws_access_key_id=access_key_id,
                aws_secret_access_key=secret_access_key,
            )
        else:
            self._client = boto3.client("s3", region_name=region)

    @property
    def bucket(self) -> str:
        return self._bucket

    def locator_for(self, key: str) -> str:
        """Build the public URL for an object key."""
        return f"https://{self._bucket}.s3-{self._region}.amazonaws.com/{key}"

    def put_object(
        self,
        key: str,
        payload: bytes,
        content_type: Optional[str] = None
    ) -> str:
        params = {"Bucket": self._bucket, "Key": key, "Body": payload}
        if content_type:
            params["ContentType"] = content_type

        try:
            self._client.put_object(**params)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"S3 put failed for {key}: {e}")
            raise UploadError(
                f"S3 upload error: failed to put object in S3: {e}",
                details={"key": key}
            ) from e

        logger.debug(f"Stored {len(payload)} bytes at s3://{self._bucket}/{key}")
        return self.locator_for(key)

    def __repr__(self) -> str:
        return f"S3ObjectStore(bucket={self._bucket!r}, region={self._region!r})"


class UnconfiguredObjectStore(ObjectStore):
    """Placeholder used when no bucket is set; every write is rejected."""

    def put_object(
        self,
        key: str,
        payload: bytes,
        content_type: Optional[str] = None
    ) -> str:
        logger.error(f"Upload of {key} rejected: S3_BUCKET_NAME is empty")
        raise UploadError(
            "Object store is not configured (S3_BUCKET_NAME is empty)",
            details={"key": key}
        )

    def __repr__(self) -> str:
        return "UnconfiguredObjectStore()"


def build_object_store(settings: Settings) -> ObjectStore:
    """
    Build the object store described by ``settings``.

    Without a bucket the store is still returned, so request validation
    runs first and the failure only surfaces on the first write.
    """
    if not settings.object_store_configured:
        return UnconfiguredObjectStore()

    return S3ObjectStore(
        bucket=settings.s3_bucket_name,
        region=settings.aws_region,
        access_key_id=settings.aws_access_key_id,
        secret_access_key=settings.aws_secret_access_key,
    )


@lru_cache(maxsize=1)
def get_object_store() -> ObjectStore:
    """FastAPI dependency returning the configured object store."""
    store = build_object_store(get_settings())
    logger.info(f"Object store ready: {store!r}")
    return store
