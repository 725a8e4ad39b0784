"""Photo, comment and count endpoints."""

from fastapi import APIRouter, Depends, File, UploadFile

from photo_share.api.dependencies import get_container, require_session
from photo_share.api.models import CommentRequest
from photo_share.api.serializers import (
    serialize_comment,
    serialize_counts,
    serialize_photo,
    serialize_user_comment,
)
from photo_share.containers import AppContainer
from photo_share.domain.sessions import RequestContext
from photo_share.errors import ValidationError
from photo_share.services.validation import parse_id

router = APIRouter(tags=["photos"], dependencies=[Depends(require_session)])


@router.get("/photosOfUser/{user_id}")
async def photos_of_user(
    user_id: str, container: AppContainer = Depends(get_container)
) -> list[dict[str, object]]:
    """Return a user's photos with comment authors resolved."""
    owner_id = parse_id(user_id, "Invalid user ID format.")
    photos = container.aggregation_service.photos_of_user(owner_id)
    return [serialize_photo(photo) for photo in photos]


@router.post("/photos/new")
async def upload_photo(
    uploadedphoto: UploadFile | None = File(default=None),
    context: RequestContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """Store an uploaded photo for the caller."""
    if uploadedphoto is None:
        raise ValidationError("Error uploading file")
    content = await uploadedphoto.read()
    photo = container.photo_service.upload_photo(
        context,
        original_name=uploadedphoto.filename,
        content=content,
        content_type=uploadedphoto.content_type,
    )
    return {"_id": str(photo.id), "user_id": str(photo.user_id)}


@router.get("/photo/counts")
async def photo_counts(
    container: AppContainer = Depends(get_container),
) -> dict[str, int]:
    """Return photo counts keyed by owner id."""
    return serialize_counts(container.aggregation_service.photo_counts_by_user())


@router.get("/photo/{photo_id}")
async def photo_detail(
    photo_id: str, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Return a photo with comment authors resolved."""
    resolved = container.aggregation_service.photo_detail(
        parse_id(photo_id, "Invalid photo ID format.")
    )
    return serialize_photo(resolved)


@router.post("/commentsOfPhoto/{photo_id}")
async def add_comment(
    photo_id: str,
    body: CommentRequest,
    context: RequestContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Append the caller's comment to a photo."""
    comment = container.photo_service.append_comment(
        context,
        parse_id(photo_id, "Invalid photo ID format."),
        body.comment,
    )
    return serialize_comment(comment)


@router.get("/comment/counts")
async def comment_counts(
    container: AppContainer = Depends(get_container),
) -> dict[str, int]:
    """Return comment counts keyed by author id."""
    return serialize_counts(container.aggregation_service.comment_counts_by_user())


@router.get("/commentsByUser/{user_id}")
async def comments_by_user(
    user_id: str, container: AppContainer = Depends(get_container)
) -> list[dict[str, object]]:
    """Return every comment a user has written, with its photo."""
    author_id = parse_id(user_id, "Invalid user ID format.")
    history = container.aggregation_service.comments_by_user(author_id)
    return [serialize_user_comment(entry) for entry in history]
