"""Derived views computed by the aggregation layer."""

from dataclasses import dataclass
from uuid import UUID

from photo_share.domain.photos import CommentRecord, PhotoRecord


@dataclass(frozen=True)
class CommentAuthor:
    """Author details joined onto a comment."""

    id: UUID | None
    first_name: str
    last_name: str


UNKNOWN_AUTHOR = CommentAuthor(id=None, first_name="Unknown", last_name="User")


@dataclass(frozen=True)
class ResolvedComment:
    """A comment with its author resolved."""

    comment: CommentRecord
    author: CommentAuthor


@dataclass(frozen=True)
class ResolvedPhoto:
    """A photo whose comments carry author details."""

    photo: PhotoRecord
    comments: list[ResolvedComment]


@dataclass(frozen=True)
class PhotoSummary:
    """Minimal photo reference attached to a user's comment."""

    id: UUID
    file_name: str
    user_id: UUID


@dataclass(frozen=True)
class UserComment:
    """A comment authored by a user, with the photo it belongs to."""

    comment: CommentRecord
    photo: PhotoSummary
