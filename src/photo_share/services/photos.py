"""Photo and embedded comment store."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import PurePosixPath
from typing import Protocol
from uuid import UUID

from photo_share.domain.photos import CommentRecord, PhotoRecord
from photo_share.domain.sessions import RequestContext
from photo_share.errors import NotFound, ValidationError
from photo_share.services.validation import require_text

logger = logging.getLogger(__name__)


class PhotoRepository(Protocol):
    """Persistence interface for photos and their comments."""

    def create_photo(
        self, user_id: UUID, file_name: str, date_time: datetime
    ) -> PhotoRecord:
        """Create a photo record and return it."""

    def get_photo(self, photo_id: UUID) -> PhotoRecord | None:
        """Return a photo by id, if present."""

    def list_photos(self) -> list[PhotoRecord]:
        """Return all photos in insertion order."""

    def list_photos_by_owner(self, user_id: UUID) -> list[PhotoRecord]:
        """Return a user's photos in insertion order."""

    def list_photos_commented_by(self, user_id: UUID) -> list[PhotoRecord]:
        """Return photos carrying at least one comment by the user."""

    def append_comment(
        self, photo_id: UUID, user_id: UUID, comment: str, date_time: datetime
    ) -> CommentRecord | None:
        """Atomically append a comment; return None if the photo is missing."""


class BlobStore(Protocol):
    """Storage for uploaded photo bytes."""

    def put(self, key: str, content: bytes, content_type: str | None) -> None:
        """Store the bytes under the key."""


@dataclass
class PhotoService:
    """Application service for photo uploads and comments."""

    repository: PhotoRepository
    blob_store: BlobStore

    def create_photo(self, owner_id: UUID, file_name: str) -> PhotoRecord:
        """Record a photo owned by the user."""
        return self.repository.create_photo(
            user_id=owner_id,
            file_name=file_name,
            date_time=datetime.now(tz=UTC),
        )

    def upload_photo(
        self,
        context: RequestContext,
        original_name: str | None,
        content: bytes,
        content_type: str | None = None,
    ) -> PhotoRecord:
        """Store uploaded bytes and record the photo for the caller."""
        if not original_name or not content:
            raise ValidationError("Error uploading file")
        file_name = build_storage_key(original_name, datetime.now(tz=UTC))
        self.blob_store.put(file_name, content, content_type)
        photo = self.create_photo(context.user_id, file_name)
        logger.info(
            "Photo uploaded",
            extra={"photo_id": str(photo.id), "user_id": str(context.user_id)},
        )
        return photo

    def append_comment(
        self, context: RequestContext, photo_id: UUID, text: str | None
    ) -> CommentRecord:
        """Append the caller's comment to a photo."""
        text = require_text(text, "Comment cannot be empty.")
        comment = self.repository.append_comment(
            photo_id=photo_id,
            user_id=context.user_id,
            comment=text,
            date_time=datetime.now(tz=UTC),
        )
        if comment is None:
            raise NotFound("Photo not found.")
        logger.info(
            "Comment added",
            extra={"photo_id": str(photo_id), "user_id": str(context.user_id)},
        )
        return comment

    def get_photo(self, photo_id: UUID) -> PhotoRecord:
        """Return a photo with its comments."""
        photo = self.repository.get_photo(photo_id)
        if photo is None:
            raise NotFound("Photo not found.")
        return photo

    def list_photos_by_owner(self, owner_id: UUID) -> list[PhotoRecord]:
        """Return a user's photos, oldest first."""
        return self.repository.list_photos_by_owner(owner_id)

    def list_photos(self) -> list[PhotoRecord]:
        """Return every photo."""
        return self.repository.list_photos()

    def list_photos_commented_by(self, user_id: UUID) -> list[PhotoRecord]:
        """Return photos the user has commented on."""
        return self.repository.list_photos_commented_by(user_id)


def build_storage_key(original_name: str, uploaded_at: datetime) -> str:
    """Return the blob key "U<epoch millis><original name>"."""
    millis = int(uploaded_at.timestamp() * 1000)
    base_name = PurePosixPath(original_name.replace("\\", "/")).name
    return f"U{millis}{base_name}"
