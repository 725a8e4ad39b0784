"""Supabase-backed photo repository with comments embedded as JSONB."""

import json
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID, uuid4

from supabase import Client

from photo_share.domain.photos import CommentRecord, PhotoRecord
from photo_share.errors import StorageError
from photo_share.services.photos import PhotoRepository

_COLUMNS = "id, user_id, file_name, date_time, comments"


@dataclass
class SupabasePhotoRepository(PhotoRepository):
    """Supabase implementation for photo persistence."""

    client: Client

    def create_photo(
        self, user_id: UUID, file_name: str, date_time: datetime
    ) -> PhotoRecord:
        """Insert a photo row and return it."""
        response = (
            self.client.table("photos")
            .insert(
                {
                    "user_id": str(user_id),
                    "file_name": file_name,
                    "date_time": date_time.isoformat(),
                    "comments": [],
                }
            )
            .execute()
        )
        if not response.data:
            raise StorageError("Failed to create photo")
        return _parse_photo(response.data[0])

    def get_photo(self, photo_id: UUID) -> PhotoRecord | None:
        """Return a photo by id, if present."""
        response = (
            self.client.table("photos")
            .select(_COLUMNS)
            .eq("id", str(photo_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_photo(response.data[0])

    def list_photos(self) -> list[PhotoRecord]:
        """Return all photos in insertion order."""
        response = (
            self.client.table("photos")
            .select(_COLUMNS)
            .order("date_time", desc=False)
            .execute()
        )
        return [_parse_photo(row) for row in response.data or []]

    def list_photos_by_owner(self, user_id: UUID) -> list[PhotoRecord]:
        """Return a user's photos in insertion order."""
        response = (
            self.client.table("photos")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("date_time", desc=False)
            .execute()
        )
        return [_parse_photo(row) for row in response.data or []]

    def list_photos_commented_by(self, user_id: UUID) -> list[PhotoRecord]:
        """Return photos whose comments include one by the user."""
        response = (
            self.client.table("photos")
            .select(_COLUMNS)
            # A list would be sent as a Postgres array, not jsonb.
            .contains("comments", json.dumps([{"user_id": str(user_id)}]))
            .order("date_time", desc=False)
            .execute()
        )
        return [_parse_photo(row) for row in response.data or []]

    def append_comment(
        self, photo_id: UUID, user_id: UUID, comment: str, date_time: datetime
    ) -> CommentRecord | None:
        """Append a comment in a single-row update via the RPC."""
        payload = {
            "id": str(uuid4()),
            "comment": comment,
            "date_time": date_time.isoformat(),
            "user_id": str(user_id),
        }
        response = self.client.rpc(
            "append_photo_comment",
            {"p_photo_id": str(photo_id), "p_comment": payload},
        ).execute()
        if not response.data:
            return None
        return _parse_comment(payload)


def _parse_photo(row: dict[str, object]) -> PhotoRecord:
    raw_comments = row.get("comments") or []
    return PhotoRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        file_name=str(row["file_name"]),
        date_time=datetime.fromisoformat(str(row["date_time"])),
        comments=tuple(
            _parse_comment(item) for item in raw_comments if isinstance(item, dict)
        ),
    )


def _parse_comment(item: dict[str, object]) -> CommentRecord:
    return CommentRecord(
        id=UUID(str(item["id"])),
        comment=str(item.get("comment", "")),
        date_time=datetime.fromisoformat(str(item["date_time"])),
        user_id=UUID(str(item["user_id"])),
    )
