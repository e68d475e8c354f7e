"""BMR and TDEE calculations."""

from prepgenie.domain.nutrition import (
    ActivityLevel,
    BiometricInput,
    EnergyProfile,
    Gender,
    Goal,
)
from prepgenie.services.macros import compute_macros

ACTIVITY_MULTIPLIERS: dict[ActivityLevel, float] = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

_MALE_OFFSET = 5
_FEMALE_OFFSET = -161


def compute_bmr(age: int, weight_kg: float, height_cm: float, gender: Gender) -> float:
    """Return the Mifflin-St Jeor basal metabolic rate in kcal/day.

    Users who select ``other`` get the mean of the male and female results.
    Inputs are not range-checked.
    """
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    match gender:
        case Gender.MALE:
            return base + _MALE_OFFSET
        case Gender.FEMALE:
            return base + _FEMALE_OFFSET
        case Gender.OTHER:
            return ((base + _MALE_OFFSET) + (base + _FEMALE_OFFSET)) / 2


def compute_tdee(bmr: float, activity_level: ActivityLevel | str) -> int:
    """Scale BMR by the activity multiplier and round to whole kcal."""
    level = ActivityLevel.parse(activity_level)
    return round(bmr * ACTIVITY_MULTIPLIERS[level])


def compute_energy_profile(
    biometrics: BiometricInput, goal: Goal | str
) -> EnergyProfile:
    """Compute TDEE, the calorie target and macro grams for a user."""
    bmr = compute_bmr(
        biometrics.age,
        biometrics.weight_kg,
        biometrics.height_cm,
        biometrics.gender,
    )
    tdee = compute_tdee(bmr, biometrics.activity_level)
    macros = compute_macros(tdee, goal, biometrics.weight_kg)
    return EnergyProfile(
        tdee=tdee,
        daily_calorie_target=macros.calories,
        target_protein=macros.protein,
        target_carbs=macros.carbs,
        target_fats=macros.fats,
    )
