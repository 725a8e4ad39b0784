"""Request dependencies shared by the routers."""

from fastapi import Depends, Request

from photo_share.containers import AppContainer
from photo_share.domain.sessions import RequestContext


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def session_token(
    request: Request, container: AppContainer = Depends(get_container)
) -> str | None:
    """Return the session token carried by the request cookie, if any."""
    return request.cookies.get(container.settings.session_cookie_name)


async def require_session(
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> RequestContext:
    """Ensure the request carries a live session and return its context."""
    return container.session_service.resolve(token)
