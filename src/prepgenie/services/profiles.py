"""Profile management: validate, compute targets, persist."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from prepgenie.domain.nutrition import (
    ActivityLevel,
    BiometricInput,
    EnergyProfile,
    Goal,
    NutritionInputError,
)
from prepgenie.domain.profiles import ProfileForm, UserProfileRecord
from prepgenie.services.energy import compute_energy_profile

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfileRecord | None:
        """Return the stored profile for a user, if present."""

    def upsert_profile(self, record: UserProfileRecord) -> UserProfileRecord:
        """Create or replace a profile and return the stored row."""


@dataclass
class ProfileService:
    """Service that keeps profile targets in sync with biometrics."""

    repository: ProfileRepository

    def calculate_targets(self, form: ProfileForm) -> EnergyProfile:
        """Compute energy and macro targets for a submitted profile."""
        try:
            biometrics = BiometricInput(
                age=form.age,
                weight_kg=form.weight,
                height_cm=form.height,
                gender=form.gender,
                activity_level=ActivityLevel.parse(form.activity_level),
            )
            return compute_energy_profile(biometrics, Goal.parse(form.goal))
        except NutritionInputError as exc:
            _logger.warning("Rejected profile input: %s", exc)
            raise

    def save_profile(self, user_id: UUID, form: ProfileForm) -> UserProfileRecord:
        """Recalculate targets and persist the profile."""
        targets = self.calculate_targets(form)
        record = UserProfileRecord(
            user_id=user_id,
            age=form.age,
            weight=form.weight,
            height=form.height,
            gender=str(form.gender),
            activity_level=form.activity_level,
            goal=form.goal,
            dietary_preference=form.dietary_preference,
            targets=targets,
            allergies=list(form.allergies),
            budget_level=form.budget_level,
            cooking_skill_level=form.cooking_skill_level,
            time_available=form.time_available,
        )
        saved = self.repository.upsert_profile(record)
        _logger.info(
            "Saved profile targets",
            extra={"user_id": str(user_id), "tdee": targets.tdee},
        )
        return saved

    def get_profile(self, user_id: UUID) -> UserProfileRecord | None:
        """Return the stored profile for a user."""
        return self.repository.get_profile(user_id)
