"""Derived views joining photos, comments and users at request time."""

from collections import Counter
from dataclasses import dataclass
from uuid import UUID

from photo_share.domain.photos import PhotoRecord
from photo_share.domain.views import (
    UNKNOWN_AUTHOR,
    CommentAuthor,
    PhotoSummary,
    ResolvedComment,
    ResolvedPhoto,
    UserComment,
)
from photo_share.services.photos import PhotoService
from photo_share.services.users import UserService


@dataclass
class AggregationService:
    """Computes counts, comment histories and comment-author joins."""

    photo_service: PhotoService
    user_service: UserService

    def photo_counts_by_user(self) -> dict[UUID, int]:
        """Return photo counts keyed by owner; owners without photos are absent."""
        photos = self.photo_service.list_photos()
        return dict(Counter(photo.user_id for photo in photos))

    def comment_counts_by_user(self) -> dict[UUID, int]:
        """Return comment counts keyed by author across all photos."""
        return dict(
            Counter(
                comment.user_id
                for photo in self.photo_service.list_photos()
                for comment in photo.comments
            )
        )

    def comments_by_user(self, user_id: UUID) -> list[UserComment]:
        """Return every comment the user wrote, photo order then comment order."""
        history = []
        for photo in self.photo_service.list_photos_commented_by(user_id):
            summary = PhotoSummary(
                id=photo.id, file_name=photo.file_name, user_id=photo.user_id
            )
            history.extend(
                UserComment(comment=comment, photo=summary)
                for comment in photo.comments
                if comment.user_id == user_id
            )
        return history

    def resolve_comment_authors(self, photo: PhotoRecord) -> ResolvedPhoto:
        """Attach author names to each comment, tolerating missing users."""
        return self._resolve_many([photo])[0]

    def photo_detail(self, photo_id: UUID) -> ResolvedPhoto:
        """Return a photo with comment authors resolved."""
        return self.resolve_comment_authors(self.photo_service.get_photo(photo_id))

    def photos_of_user(self, user_id: UUID) -> list[ResolvedPhoto]:
        """Return a user's photos with comment authors resolved."""
        return self._resolve_many(self.photo_service.list_photos_by_owner(user_id))

    def _resolve_many(self, photos: list[PhotoRecord]) -> list[ResolvedPhoto]:
        users = self.user_service.get_users_by_ids(
            comment.user_id for photo in photos for comment in photo.comments
        )
        authors = {
            user_id: CommentAuthor(
                id=user.id, first_name=user.first_name, last_name=user.last_name
            )
            for user_id, user in users.items()
        }
        return [
            ResolvedPhoto(
                photo=photo,
                comments=[
                    ResolvedComment(
                        comment=comment,
                        author=authors.get(comment.user_id, UNKNOWN_AUTHOR),
                    )
                    for comment in photo.comments
                ],
            )
            for photo in photos
        ]
