"""Nutrition domain models."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Self


class NutritionInputError(ValueError):
    """Raised when a raw value does not match a closed nutrition enumeration."""

    label = "Invalid nutrition input"

    def __init__(self, value: object) -> None:
        super().__init__(f"{self.label}: {value!r}")
        self.value = value


class InvalidActivityLevelError(NutritionInputError):
    """Raised for an activity level outside the five known keys."""

    label = "Invalid activity level"


class InvalidGoalError(NutritionInputError):
    """Raised for a goal outside the four known values."""

    label = "Invalid goal"


class Gender(StrEnum):
    """Gender used to pick the BMR constant."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class ActivityLevel(StrEnum):
    """Activity level, ordered from least to most active."""

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    @classmethod
    def parse(cls, raw: "str | ActivityLevel") -> Self:
        """Return the activity level for a raw value or raise."""
        try:
            return cls(raw)
        except ValueError:
            raise InvalidActivityLevelError(raw) from None


class Goal(StrEnum):
    """Goal driving the calorie adjustment and macro split."""

    WEIGHT_LOSS = "weight_loss"
    MAINTAIN = "maintain"
    MUSCLE_GAIN = "muscle_gain"
    BALANCED = "balanced"

    @classmethod
    def parse(cls, raw: "str | Goal") -> Self:
        """Return the goal for a raw value or raise."""
        try:
            return cls(raw)
        except ValueError:
            raise InvalidGoalError(raw) from None


@dataclass(frozen=True)
class BiometricInput:
    """Biometric data needed to estimate energy expenditure."""

    age: int
    weight_kg: float
    height_cm: float
    gender: Gender
    activity_level: ActivityLevel


@dataclass(frozen=True)
class MacroRatio:
    """Share of calories assigned to each macro."""

    protein: float
    carbs: float
    fats: float


@dataclass(frozen=True)
class MacroTargets:
    """Daily calorie target and macro grams."""

    calories: int
    protein: int
    carbs: int
    fats: int


@dataclass(frozen=True)
class MacroPercentages:
    """Integer percent of calories contributed by each macro."""

    protein: int
    carbs: int
    fats: int


@dataclass(frozen=True)
class MacroValidation:
    """Result of checking macros against recommended ranges."""

    is_valid: bool
    warnings: list[str]


@dataclass(frozen=True)
class EnergyProfile:
    """Daily energy and macro targets derived from a profile."""

    tdee: int
    daily_calorie_target: int
    target_protein: int
    target_carbs: int
    target_fats: int
