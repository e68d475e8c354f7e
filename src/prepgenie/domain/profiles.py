"""Profile domain models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from prepgenie.domain.nutrition import EnergyProfile, Gender

DietaryPreference = Literal["omnivore", "vegetarian", "vegan", "pescatarian", "halal"]
BudgetLevel = Literal["low", "medium", "high"]
CookingSkillLevel = Literal["beginner", "intermediate", "advanced"]
Locale = Literal["en", "ja"]
UnitSystem = Literal["metric", "imperial"]
Currency = Literal["USD", "JPY"]

MIN_AGE = 13
MAX_AGE = 120


class ProfileForm(BaseModel):
    """User-submitted profile fields.

    Activity level and goal stay raw strings here; they are parsed by the
    calculator so unknown values surface as nutrition input errors.
    """

    age: int = Field(ge=MIN_AGE, le=MAX_AGE)
    weight: float = Field(gt=0, description="Weight in kg")
    height: float = Field(gt=0, description="Height in cm")
    gender: Gender
    activity_level: str
    goal: str
    dietary_preference: DietaryPreference
    allergies: list[str] = Field(default_factory=list)
    budget_level: BudgetLevel | None = None
    cooking_skill_level: CookingSkillLevel | None = None
    time_available: int | None = Field(default=None, gt=0)

    @field_validator("allergies", mode="before")
    @classmethod
    def _split_allergies(cls, value: object) -> object:
        if isinstance(value, str):
            return [chunk.strip() for chunk in value.split(",") if chunk.strip()]
        return value


class LocalePreferences(BaseModel):
    """Display preferences for a user."""

    locale: Locale = "en"
    unit_system: UnitSystem = "metric"
    currency: Currency = "USD"


@dataclass(frozen=True)
class UserProfileRecord:
    """A stored user profile with its derived targets."""

    user_id: UUID
    age: int
    weight: float
    height: float
    gender: str
    activity_level: str
    goal: str
    dietary_preference: str
    targets: EnergyProfile
    allergies: list[str] = field(default_factory=list)
    budget_level: str | None = None
    cooking_skill_level: str | None = None
    time_available: int | None = None
    updated_at: datetime | None = None
