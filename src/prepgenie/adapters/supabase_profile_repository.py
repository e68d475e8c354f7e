"""Supabase-backed profile repository."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from prepgenie.domain.nutrition import EnergyProfile
from prepgenie.domain.profiles import UserProfileRecord
from prepgenie.services.profiles import ProfileRepository

_PROFILE_COLUMNS = (
    "id, age, weight, height, gender, activity_level, goal, dietary_preference, "
    "allergies, budget_level, cooking_skill_level, time_available, tdee, "
    "daily_calorie_target, target_protein, target_carbs, target_fats, updated_at"
)


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for the user_profiles table."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfileRecord | None:
        """Return the stored profile for a user, if present."""
        response = (
            self.client.table("user_profiles")
            .select(_PROFILE_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _to_record(response.data[0])

    def upsert_profile(self, record: UserProfileRecord) -> UserProfileRecord:
        """Insert or update the profile row and return it."""
        targets = record.targets
        payload = {
            "id": str(record.user_id),
            "age": record.age,
            "weight": record.weight,
            "height": record.height,
            "gender": record.gender,
            "activity_level": record.activity_level,
            "goal": record.goal,
            "dietary_preference": record.dietary_preference,
            "allergies": record.allergies,
            "budget_level": record.budget_level,
            "cooking_skill_level": record.cooking_skill_level,
            "time_available": record.time_available,
            "tdee": targets.tdee,
            "daily_calorie_target": targets.daily_calorie_target,
            "target_protein": targets.target_protein,
            "target_carbs": targets.target_carbs,
            "target_fats": targets.target_fats,
            "updated_at": datetime.now(tz=UTC).isoformat(),
        }
        response = self.client.table("user_profiles").upsert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to save user profile in Supabase")
        return _to_record(response.data[0])


def _to_record(row: dict[str, object]) -> UserProfileRecord:
    updated_at = row.get("updated_at")
    return UserProfileRecord(
        user_id=UUID(str(row["id"])),
        age=int(row["age"]),
        weight=float(row["weight"]),
        height=float(row["height"]),
        gender=str(row["gender"]),
        activity_level=str(row["activity_level"]),
        goal=str(row["goal"]),
        dietary_preference=str(row["dietary_preference"]),
        targets=EnergyProfile(
            tdee=int(row["tdee"]),
            daily_calorie_target=int(row["daily_calorie_target"]),
            target_protein=int(row["target_protein"]),
            target_carbs=int(row["target_carbs"]),
            target_fats=int(row["target_fats"]),
        ),
        allergies=list(row.get("allergies") or []),
        budget_level=row.get("budget_level"),
        cooking_skill_level=row.get("cooking_skill_level"),
        time_available=row.get("time_available"),
        updated_at=datetime.fromisoformat(str(updated_at)) if updated_at else None,
    )
