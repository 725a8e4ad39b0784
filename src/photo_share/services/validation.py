"""Input validation helpers shared by services."""

from uuid import UUID

from photo_share.errors import ValidationError


def require_text(value: str | None, message: str) -> str:
    """Return the value when it has non-whitespace content."""
    if value is None or not value.strip():
        raise ValidationError(message)
    return value


def parse_id(raw: str, message: str = "Invalid id format.") -> UUID:
    """Parse a client-supplied id."""
    try:
        return UUID(raw)
    except ValueError as exc:
        raise ValidationError(message) from exc
