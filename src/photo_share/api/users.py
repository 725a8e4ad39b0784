"""User registration and profile endpoints."""

from fastapi import APIRouter, Depends

from photo_share.api.dependencies import get_container, require_session
from photo_share.api.models import RegisterRequest
from photo_share.api.serializers import (
    serialize_registered_user,
    serialize_user_profile,
    serialize_user_summary,
)
from photo_share.containers import AppContainer
from photo_share.services.validation import parse_id

router = APIRouter(tags=["users"])


@router.post("/user")
async def register(
    body: RegisterRequest, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Register a new user."""
    user = container.user_service.register(
        login_name=body.login_name,
        password=body.password,
        first_name=body.first_name,
        last_name=body.last_name,
        location=body.location,
        description=body.description,
        occupation=body.occupation,
    )
    return serialize_registered_user(user)


@router.get("/user/list", dependencies=[Depends(require_session)])
async def list_users(
    container: AppContainer = Depends(get_container),
) -> list[dict[str, object]]:
    """Return the id and name of every user."""
    users = container.user_service.list_users()
    return [serialize_user_summary(user) for user in users]


@router.get("/user/{user_id}", dependencies=[Depends(require_session)])
async def user_detail(
    user_id: str, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Return a user's public profile."""
    user = container.user_service.get_user(
        parse_id(user_id, "Invalid user ID format.")
    )
    return serialize_user_profile(user)
