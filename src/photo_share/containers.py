"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from photo_share.adapters.supabase_blob_store import SupabaseBlobStore
from photo_share.adapters.supabase_photo_repository import SupabasePhotoRepository
from photo_share.adapters.supabase_stats_repository import SupabaseStatsRepository
from photo_share.adapters.supabase_user_repository import SupabaseUserRepository
from photo_share.config import Settings
from photo_share.services.feed import PhotoFeedService
from photo_share.services.photos import PhotoService
from photo_share.services.sessions import InMemorySessionStore, SessionGate
from photo_share.services.stats import StatsService
from photo_share.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    session_gate: SessionGate
    photo_service: PhotoService
    feed_service: PhotoFeedService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    photo_repository = SupabasePhotoRepository(supabase_client)
    stats_repository = SupabaseStatsRepository(supabase_client)
    blob_store = SupabaseBlobStore(
        client=supabase_client, bucket=resolved_settings.photo_bucket
    )
    session_gate = SessionGate(
        user_repository=user_repository,
        store=InMemorySessionStore(ttl_seconds=resolved_settings.session_ttl_seconds),
    )

    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(user_repository),
        session_gate=session_gate,
        photo_service=PhotoService(repository=photo_repository, blob_store=blob_store),
        feed_service=PhotoFeedService(
            user_repository=user_repository, photo_repository=photo_repository
        ),
        stats_service=StatsService(stats_repository),
    )
