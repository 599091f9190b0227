"""
==============================================================================
Ingestion Pipeline Module
==============================================================================

Uploads the files attached to a write request and returns their locators.

Flow (per file, in submission order):
------------------------------------
1. Read the attachment stream fully into memory
2. Build key "{prefix}/{unix_timestamp}-{basename}"
3. Hand the bytes to the ObjectStore, collect the locator

Failure Policy:
--------------
- No attachments: ValidationError, nothing is uploaded
- Unreadable stream or store rejection: UploadError, the whole ingest
  fails and no locators are returned

Objects uploaded before a later failure stay in the bucket; there is no
compensating delete.

==============================================================================
"""

from __future__ import annotations

import logging
import os
import time
from typing import BinaryIO, Callable, List, Optional, Protocol, Sequence

from marketplace.core import exceptions
from marketplace.core.exceptions import UploadError
from marketplace.storage.object_store import ObjectStore


# Module logger
logger = logging.getLogger(__name__)


class Attachment(Protocol):
    """Shape of an uploaded file (satisfied by FastAPI's UploadFile)."""

    filename: Optional[str]
    file: BinaryIO
    content_type: Optional[str]


class IngestionPipeline:
    """
    Uploads request attachments to the object store.

    Attributes:
        _store: Destination ObjectStore
        _key_prefix: Prefix prepended to every object key
        _clock: Returns the current unix time (seconds)

    Example:
        >>> pipeline = IngestionPipeline(store)
        >>> pipeline.ingest(files)
        ['https://bucket.s3-us-east-1.amazonaws.com/uploads/1700000000-mug.jpg']
    """

    def __init__(
        self,
        store: ObjectStore,
        key_prefix: str = "uploads",
        clock: Callable[[], float] = time.time
    ) -> None:
        self._store = store
        self._key_prefix = key_prefix.strip("/")
        self._clock = clock

    def build_key(self, filename: Optional[str]) -> str:
        """
        Build the object key for an attachment.

        Only the base name of the client-supplied filename is kept.
        """
        base = os.path.basename((filename or "").replace("\\", "/")) or "upload"
        name = f"{int(self._clock())}-{base}"
        return f"{self._key_prefix}/{name}" if self._key_prefix else name

    def _read(self, attachment: Attachment) -> bytes:
        """Buffer the full attachment payload."""
        try:
            attachment.file.seek(0)
            return attachment.file.read()
        except (OSError, ValueError) as e:
            raise UploadError(
                f"Failed to open file: {e}",
                details={"filename": attachment.filename}
            ) from e

    def ingest(self, attachments: Optional[Sequence[Attachment]]) -> List[str]:
        """
        Upload every attachment and return locators in submission order.

        Args:
            attachments: Uploaded files, possibly None or empty

        Returns:
            Locator URLs, one per attachment

        Raises:
            ValidationError: If there are no attachments
            UploadError: If any read or store write fails
        """
        if not attachments:
            raise exceptions.no_files_uploaded()

        locators: List[str] = []

        for attachment in attachments:
            payload = self._read(attachment)
            key = self.build_key(attachment.filename)
            locator = self._store.put_object(key, payload, attachment.content_type)
            locators.append(locator)
            logger.info(f"⬆️ Uploaded {attachment.filename!r} ({len(payload)} bytes) → {key}")

        return locators
