"""Locale preferences and profile display rendering."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from prepgenie.domain.profiles import LocalePreferences, UserProfileRecord
from prepgenie.services.units import (
    cup_size_ml,
    format_calories,
    format_grams,
    format_height,
    format_weight,
)


class PreferencesRepository(Protocol):
    """Persistence interface for locale preferences."""

    def get_preferences(self, user_id: UUID) -> LocalePreferences | None:
        """Return stored preferences, if any."""

    def set_preferences(self, user_id: UUID, preferences: LocalePreferences) -> None:
        """Persist preferences for a user."""


@dataclass
class PreferencesService:
    """Service for locale, unit system and currency preferences."""

    repository: PreferencesRepository
    default_locale: str = "en"

    def get_preferences(self, user_id: UUID) -> LocalePreferences:
        """Return stored preferences or the defaults."""
        stored = self.repository.get_preferences(user_id)
        if stored is not None:
            if "locale" not in stored.model_fields_set:
                return stored.model_copy(update={"locale": self.default_locale})
            return stored
        return LocalePreferences.model_validate({"locale": self.default_locale})

    def update_preferences(
        self, user_id: UUID, preferences: LocalePreferences
    ) -> LocalePreferences:
        """Persist preferences and return them."""
        self.repository.set_preferences(user_id, preferences)
        return preferences


def render_profile(
    profile: UserProfileRecord, preferences: LocalePreferences
) -> dict[str, str]:
    """Render profile values with the user's preferred units."""
    imperial = preferences.unit_system == "imperial"
    targets = profile.targets
    return {
        "weight": format_weight(profile.weight, "lb" if imperial else "kg"),
        "height": format_height(profile.height, "ft_in" if imperial else "cm"),
        "tdee": format_calories(targets.tdee),
        "daily_calorie_target": format_calories(targets.daily_calorie_target),
        "target_protein": format_grams(targets.target_protein),
        "target_carbs": format_grams(targets.target_carbs),
        "target_fats": format_grams(targets.target_fats),
        "cup_size": f"{cup_size_ml(preferences.locale)}mL",
    }
