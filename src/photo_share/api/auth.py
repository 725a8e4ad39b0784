"""Login, logout and session check endpoints."""

import logging

from fastapi import APIRouter, Depends, Response

from photo_share.api.dependencies import get_container, require_session, session_token
from photo_share.api.models import LoginRequest
from photo_share.api.serializers import serialize_user_summary
from photo_share.containers import AppContainer
from photo_share.domain.sessions import RequestContext
from photo_share.errors import NotFound, Unauthenticated, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["auth"])


@router.post("/login")
async def login(
    body: LoginRequest,
    response: Response,
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Verify credentials and start a cookie session."""
    if not body.login_name or not body.password:
        raise ValidationError("Both login_name and password are required.")
    user = container.user_service.verify(body.login_name, body.password)
    session = container.session_service.create(user.id)
    settings = container.settings
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.token,
        max_age=settings.session_ttl_hours * 3600,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
    logger.info("User logged in", extra={"user_id": str(user.id)})
    return serialize_user_summary(user)


@router.post("/logout")
async def logout(
    response: Response,
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, str]:
    """End the caller's session and clear the cookie."""
    container.session_service.destroy(token)
    response.delete_cookie(container.settings.session_cookie_name)
    return {"status": "ok"}


@router.get("/checkSession")
async def check_session(
    context: RequestContext = Depends(require_session),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the logged-in user for a live session."""
    try:
        user = container.user_service.get_user(context.user_id)
    except NotFound as exc:
        raise Unauthenticated from exc
    return serialize_user_summary(user)
