"""Supabase repository for collection counts."""

from dataclasses import dataclass

from supabase import Client

from photo_share.services.diagnostics import DiagnosticsRepository

_TABLES = {"user": "users", "photo": "photos", "session": "sessions"}


@dataclass
class SupabaseDiagnosticsRepository(DiagnosticsRepository):
    """Counts rows with PostgREST exact counts."""

    client: Client

    def count(self, collection: str) -> int:
        """Return the number of rows backing a collection."""
        response = (
            self.client.table(_TABLES[collection])
            .select("*", count="exact")
            .limit(1)
            .execute()
        )
        return response.count or 0
