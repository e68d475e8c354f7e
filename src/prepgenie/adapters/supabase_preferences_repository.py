"""Supabase repository for locale preferences."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from prepgenie.domain.profiles import LocalePreferences
from prepgenie.services.preferences import PreferencesRepository


@dataclass
class SupabasePreferencesRepository(PreferencesRepository):
    """Stores preferences in the locale columns of user_profiles."""

    client: Client

    def get_preferences(self, user_id: UUID) -> LocalePreferences | None:
        """Return stored preferences, ignoring rows with no locale set."""
        response = (
            self.client.table("user_profiles")
            .select("locale, unit_system, currency")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = {key: value for key, value in response.data[0].items() if value}
        if not row:
            return None
        return LocalePreferences.model_validate(row)

    def set_preferences(self, user_id: UUID, preferences: LocalePreferences) -> None:
        """Update the locale columns for a user."""
        response = (
            self.client.table("user_profiles")
            .update(
                {
                    **preferences.model_dump(),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .eq("id", str(user_id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save preferences in Supabase")
