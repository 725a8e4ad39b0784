"""Dependency container wiring for the application."""

from dataclasses import dataclass
from datetime import timedelta

from supabase import create_client

from photo_share.adapters.supabase_blob_store import SupabaseBlobStore
from photo_share.adapters.supabase_diagnostics_repository import (
    SupabaseDiagnosticsRepository,
)
from photo_share.adapters.supabase_photo_repository import SupabasePhotoRepository
from photo_share.adapters.supabase_session_repository import (
    SupabaseSessionRepository,
)
from photo_share.adapters.supabase_user_repository import SupabaseUserRepository
from photo_share.config import Settings
from photo_share.services.aggregation import AggregationService
from photo_share.services.diagnostics import DiagnosticsService
from photo_share.services.photos import PhotoService
from photo_share.services.sessions import SessionService
from photo_share.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    session_service: SessionService
    photo_service: PhotoService
    aggregation_service: AggregationService
    diagnostics_service: DiagnosticsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(
        SupabaseUserRepository(supabase_client),
        iterations=resolved_settings.password_hash_iterations,
    )
    session_service = SessionService(
        SupabaseSessionRepository(supabase_client),
        ttl=timedelta(hours=resolved_settings.session_ttl_hours),
    )
    photo_service = PhotoService(
        repository=SupabasePhotoRepository(supabase_client),
        blob_store=SupabaseBlobStore(supabase_client, resolved_settings.photo_bucket),
    )
    aggregation_service = AggregationService(
        photo_service=photo_service,
        user_service=user_service,
    )
    diagnostics_service = DiagnosticsService(
        repository=SupabaseDiagnosticsRepository(supabase_client),
        environment=resolved_settings.environment,
    )

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        session_service=session_service,
        photo_service=photo_service,
        aggregation_service=aggregation_service,
        diagnostics_service=diagnostics_service,
    )
