"""Application error taxonomy mapped to HTTP status codes."""

from fastapi import status


class PhotoShareError(Exception):
    """Base class for errors reported to API clients."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(PhotoShareError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request."


class DuplicateLogin(PhotoShareError):
    """Login name is already registered."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "login_name already exists."


class InvalidCredentials(PhotoShareError):
    """Unknown login name or wrong password; deliberately indistinguishable."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid login name or password."


class NotLoggedIn(PhotoShareError):
    """Logout attempted without a live session."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User is not logged in."


class Unauthenticated(PhotoShareError):
    """Missing, unknown or expired session."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class NotFound(PhotoShareError):
    """Referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class InternalError(PhotoShareError):
    """Unexpected failure; the message never reaches the client."""


class StorageError(InternalError):
    """Backing store or blob store failure."""
