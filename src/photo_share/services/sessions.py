"""Login session lifecycle with a fixed time-to-live."""

import logging
import secrets
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol
from uuid import UUID

from photo_share.domain.sessions import RequestContext, SessionRecord
from photo_share.errors import NotLoggedIn, Unauthenticated

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(hours=24)


class SessionRepository(Protocol):
    """Persistence interface for login sessions."""

    def create_session(
        self, token: str, user_id: UUID, expires_at: datetime
    ) -> SessionRecord:
        """Persist a new session and return it."""

    def get_session(self, token: str) -> SessionRecord | None:
        """Return a session by token, if present."""

    def delete_session(self, token: str) -> None:
        """Delete a session by token."""


@dataclass
class SessionService:
    """Issues, resolves and destroys session tokens."""

    repository: SessionRepository
    ttl: timedelta = DEFAULT_TTL

    def create(self, user_id: UUID) -> SessionRecord:
        """Start a session for the user and return it."""
        token = secrets.token_urlsafe(32)
        expires_at = datetime.now(tz=UTC) + self.ttl
        session = self.repository.create_session(token, user_id, expires_at)
        logger.info("Session created", extra={"user_id": str(user_id)})
        return session

    def resolve(self, token: str | None) -> RequestContext:
        """Return the request context for a live session token."""
        session = self._live_session(token)
        if session is None:
            raise Unauthenticated
        return RequestContext(token=session.token, user_id=session.user_id)

    def destroy(self, token: str | None) -> None:
        """End the session identified by the token."""
        session = self._live_session(token)
        if session is None:
            raise NotLoggedIn
        self.repository.delete_session(session.token)
        logger.info("Session destroyed", extra={"user_id": str(session.user_id)})

    def _live_session(self, token: str | None) -> SessionRecord | None:
        if not token:
            return None
        session = self.repository.get_session(token)
        if session is None:
            return None
        if session.expires_at <= datetime.now(tz=UTC):
            self.repository.delete_session(session.token)
            return None
        return session
