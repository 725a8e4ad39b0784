"""Server information and collection counts."""

from dataclasses import dataclass
from typing import Protocol

from photo_share import __version__

COLLECTIONS = ("user", "photo", "session")


class DiagnosticsRepository(Protocol):
    """Persistence interface for collection statistics."""

    def count(self, collection: str) -> int:
        """Return the number of rows in a collection."""


@dataclass
class DiagnosticsService:
    """Reports basic facts about the running service."""

    repository: DiagnosticsRepository
    environment: str

    def info(self) -> dict[str, str]:
        """Return version and environment."""
        return {"version": __version__, "environment": self.environment}

    def counts(self) -> dict[str, int]:
        """Return the population of each collection."""
        return {name: self.repository.count(name) for name in COLLECTIONS}
