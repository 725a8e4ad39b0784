"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from postgrest.exceptions import APIError
from supabase import Client

from photo_share.domain.users import PasswordEntry, UserRecord
from photo_share.errors import DuplicateLogin, StorageError
from photo_share.services.users import UserRepository

_COLUMNS = (
    "id, login_name, password_digest, salt, password_iterations, first_name, "
    "last_name, location, description, occupation"
)
_UNIQUE_VIOLATION = "23505"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_login_name(self, login_name: str) -> UserRecord | None:
        """Return the user with the login name, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("login_name", login_name)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the id, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_ids(self, user_ids: list[UUID]) -> list[UserRecord]:
        """Return the users that exist among the ids."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .in_("id", [str(user_id) for user_id in user_ids])
            .execute()
        )
        return [_parse_user(row) for row in response.data or []]

    def list_users(self) -> list[UserRecord]:
        """Return all users ordered by creation."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_user(row) for row in response.data or []]

    def create_user(  # noqa: PLR0913
        self,
        login_name: str,
        password: PasswordEntry,
        first_name: str,
        last_name: str,
        location: str,
        description: str,
        occupation: str,
    ) -> UserRecord:
        """Insert a user row and return it."""
        try:
            response = (
                self.client.table("users")
                .insert(
                    {
                        "login_name": login_name,
                        "password_digest": password.digest,
                        "salt": password.salt,
                        "password_iterations": password.iterations,
                        "first_name": first_name,
                        "last_name": last_name,
                        "location": location,
                        "description": description,
                        "occupation": occupation,
                    }
                )
                .execute()
            )
        except APIError as exc:
            if exc.code == _UNIQUE_VIOLATION:
                raise DuplicateLogin from exc
            raise
        if not response.data:
            raise StorageError("Failed to create user in Supabase")
        return _parse_user(response.data[0])


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        login_name=str(row["login_name"]),
        first_name=str(row["first_name"]),
        last_name=str(row["last_name"]),
        password=PasswordEntry(
            digest=str(row.get("password_digest") or ""),
            salt=str(row.get("salt") or ""),
            iterations=int(row["password_iterations"]),
        ),
        location=str(row.get("location") or ""),
        description=str(row.get("description") or ""),
        occupation=str(row.get("occupation") or ""),
    )
