"""Supabase Storage blob store for uploaded photos."""

import logging
from dataclasses import dataclass

from supabase import Client

from photo_share.errors import StorageError
from photo_share.services.photos import BlobStore

logger = logging.getLogger(__name__)


@dataclass
class SupabaseBlobStore(BlobStore):
    """Writes photo bytes into a Supabase Storage bucket."""

    client: Client
    bucket: str

    def put(self, key: str, content: bytes, content_type: str | None) -> None:
        """Upload the bytes under the key."""
        options = {"content-type": content_type} if content_type else None
        try:
            self.client.storage.from_(self.bucket).upload(key, content, options)
        except Exception as exc:
            logger.exception("Failed to store photo", extra={"key": key})
            raise StorageError("Error saving file") from exc
