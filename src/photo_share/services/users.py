"""Credential store: registration, login verification and profiles."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from photo_share.domain.users import PasswordEntry, UserRecord
from photo_share.errors import DuplicateLogin, InvalidCredentials, NotFound
from photo_share.services.passwords import (
    DEFAULT_ITERATIONS,
    check_password,
    decoy_password_entry,
    make_password_entry,
)
from photo_share.services.validation import require_text

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_login_name(self, login_name: str) -> UserRecord | None:
        """Return the user with the login name, if present."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with the id, if present."""

    def get_by_ids(self, user_ids: list[UUID]) -> list[UserRecord]:
        """Return the users that exist among the ids."""

    def list_users(self) -> list[UserRecord]:
        """Return all users."""

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
        """Create and return a new user record."""


@dataclass
class UserService:
    """Application service for user registration and lookup."""

    repository: UserRepository
    iterations: int = DEFAULT_ITERATIONS

    def register(  # noqa: PLR0913
        self,
        login_name: str | None,
        password: str | None,
        first_name: str | None,
        last_name: str | None,
        location: str | None = None,
        description: str | None = None,
        occupation: str | None = None,
    ) -> UserRecord:
        """Register a new user and return the stored record."""
        login_name = require_text(login_name, "login_name is required.")
        password = require_text(
            password, "password is required and cannot be empty."
        )
        first_name = require_text(
            first_name, "first_name is required and cannot be empty."
        )
        last_name = require_text(
            last_name, "last_name is required and cannot be empty."
        )
        if self.repository.get_by_login_name(login_name) is not None:
            raise DuplicateLogin

        user = self.repository.create_user(
            login_name=login_name,
            password=make_password_entry(password, self.iterations),
            first_name=first_name,
            last_name=last_name,
            location=location or "",
            description=description or "",
            occupation=occupation or "",
        )
        logger.info("Registered user", extra={"user_id": str(user.id)})
        return user

    def verify(self, login_name: str, password: str) -> UserRecord:
        """Return the user when the credentials match."""
        user = self.repository.get_by_login_name(login_name)
        # Unknown logins still run one full hash check.
        entry = user.password if user else decoy_password_entry(self.iterations)
        if not check_password(entry, password) or user is None:
            logger.warning("Rejected login attempt")
            raise InvalidCredentials
        return user

    def get_user(self, user_id: UUID) -> UserRecord:
        """Return a user by id."""
        user = self.repository.get_by_id(user_id)
        if user is None:
            raise NotFound("User not found.")
        return user

    def list_users(self) -> list[UserRecord]:
        """Return all registered users."""
        return self.repository.list_users()

    def get_users_by_ids(self, user_ids: Iterable[UUID]) -> dict[UUID, UserRecord]:
        """Return the users that exist among the ids, keyed by id."""
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}
        return {user.id: user for user in self.repository.get_by_ids(unique_ids)}
