"""Response shaping for domain objects."""

from uuid import UUID

from photo_share.domain.photos import CommentRecord, PhotoRecord
from photo_share.domain.views import CommentAuthor, ResolvedPhoto, UserComment
from photo_share.domain.users import UserRecord


def serialize_registered_user(user: UserRecord) -> dict[str, object]:
    return {
        "_id": str(user.id),
        "login_name": user.login_name,
        "first_name": user.first_name,
        "last_name": user.last_name,
    }


def serialize_user_summary(user: UserRecord) -> dict[str, object]:
    return {
        "_id": str(user.id),
        "first_name": user.first_name,
        "last_name": user.last_name,
    }


def serialize_user_profile(user: UserRecord) -> dict[str, object]:
    """Return the public profile; credentials are never included."""
    return {
        **serialize_user_summary(user),
        "location": user.location,
        "description": user.description,
        "occupation": user.occupation,
    }


def serialize_comment(comment: CommentRecord) -> dict[str, object]:
    return {
        "_id": str(comment.id),
        "comment": comment.comment,
        "date_time": comment.date_time.isoformat(),
        "user_id": str(comment.user_id),
    }


def serialize_author(author: CommentAuthor) -> dict[str, object]:
    return {
        "_id": str(author.id) if author.id else None,
        "first_name": author.first_name,
        "last_name": author.last_name,
    }


def serialize_photo(resolved: ResolvedPhoto) -> dict[str, object]:
    photo = resolved.photo
    return {
        **serialize_photo_reference(photo),
        "date_time": photo.date_time.isoformat(),
        "comments": [
            {
                **serialize_comment(item.comment),
                "user": serialize_author(item.author),
            }
            for item in resolved.comments
        ],
    }


def serialize_photo_reference(photo: PhotoRecord) -> dict[str, object]:
    return {
        "_id": str(photo.id),
        "user_id": str(photo.user_id),
        "file_name": photo.file_name,
    }


def serialize_user_comment(entry: UserComment) -> dict[str, object]:
    return {
        "_id": str(entry.comment.id),
        "text": entry.comment.comment,
        "date_time": entry.comment.date_time.isoformat(),
        "photo": {
            "_id": str(entry.photo.id),
            "file_name": entry.photo.file_name,
            "user_id": str(entry.photo.user_id),
        },
    }


def serialize_counts(counts: dict[UUID, int]) -> dict[str, int]:
    return {str(user_id): count for user_id, count in counts.items()}
