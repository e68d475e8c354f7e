"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from prepgenie.adapters.supabase_identity_provider import SupabaseIdentityProvider
from prepgenie.adapters.supabase_preferences_repository import (
    SupabasePreferencesRepository,
)
from prepgenie.adapters.supabase_profile_repository import SupabaseProfileRepository
from prepgenie.config import Settings, parse_locale
from prepgenie.services.preferences import PreferencesService
from prepgenie.services.profiles import ProfileService
from prepgenie.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    profile_service: ProfileService
    preferences_service: PreferencesService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_service = UserService(SupabaseIdentityProvider(supabase_client))
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    preferences_service = PreferencesService(
        SupabasePreferencesRepository(supabase_client),
        default_locale=parse_locale(resolved_settings.default_locale),
    )

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        profile_service=profile_service,
        preferences_service=preferences_service,
    )
