"""Domain models for photos and their embedded comments."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class CommentRecord:
    """A comment embedded in a photo."""

    id: UUID
    comment: str
    date_time: datetime
    user_id: UUID


@dataclass(frozen=True)
class PhotoRecord:
    """An uploaded photo with its comments in append order."""

    id: UUID
    user_id: UUID
    file_name: str
    date_time: datetime
    comments: tuple[CommentRecord, ...] = field(default_factory=tuple)
