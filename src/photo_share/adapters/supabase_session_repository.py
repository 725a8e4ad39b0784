"""Supabase-backed session repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from photo_share.domain.sessions import SessionRecord
from photo_share.errors import StorageError
from photo_share.services.sessions import SessionRepository


@dataclass
class SupabaseSessionRepository(SessionRepository):
    """Supabase implementation for login sessions."""

    client: Client

    def create_session(
        self, token: str, user_id: UUID, expires_at: datetime
    ) -> SessionRecord:
        """Create a session row and return it."""
        response = (
            self.client.table("sessions")
            .insert(
                {
                    "token": token,
                    "user_id": str(user_id),
                    "expires_at": expires_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise StorageError("Failed to create session")
        return _parse_session(response.data[0])

    def get_session(self, token: str) -> SessionRecord | None:
        """Return a session by token, if present."""
        response = (
            self.client.table("sessions")
            .select("token, user_id, expires_at")
            .eq("token", token)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_session(response.data[0])

    def delete_session(self, token: str) -> None:
        """Delete a session row."""
        self.client.table("sessions").delete().eq("token", token).execute()


def _parse_session(row: dict[str, object]) -> SessionRecord:
    return SessionRecord(
        token=str(row["token"]),
        user_id=UUID(str(row["user_id"])),
        expires_at=datetime.fromisoformat(str(row["expires_at"])),
    )
