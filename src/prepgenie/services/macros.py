"""Macro-nutrient targets from TDEE and goal."""

from prepgenie.domain.nutrition import (
    Goal,
    MacroPercentages,
    MacroRatio,
    MacroTargets,
    MacroValidation,
)

GOAL_ADJUSTMENTS: dict[Goal, float] = {
    Goal.WEIGHT_LOSS: -0.20,
    Goal.MAINTAIN: 0.0,
    Goal.MUSCLE_GAIN: 0.10,
    Goal.BALANCED: 0.0,
}

MACRO_RATIOS: dict[Goal, MacroRatio] = {
    Goal.WEIGHT_LOSS: MacroRatio(protein=0.35, carbs=0.35, fats=0.30),
    Goal.MAINTAIN: MacroRatio(protein=0.30, carbs=0.40, fats=0.30),
    Goal.MUSCLE_GAIN: MacroRatio(protein=0.30, carbs=0.45, fats=0.25),
    Goal.BALANCED: MacroRatio(protein=0.30, carbs=0.40, fats=0.30),
}

# Atwater factors
CALORIES_PER_GRAM = {
    "protein": 4,
    "carbs": 4,
    "fats": 9,
}

_RECOMMENDED_RANGES = {
    "protein": (15, 35),
    "fats": (20, 35),
    "carbs": (45, 65),
}


def compute_macros(tdee: int, goal: Goal | str, weight: float) -> MacroTargets:
    """Return the adjusted calorie target and macro grams for a goal.

    ``weight`` is part of the profile input but the split is purely
    ratio based, so it is not consulted.
    """
    parsed_goal = Goal.parse(goal)
    calories = round(tdee * (1 + GOAL_ADJUSTMENTS[parsed_goal]))
    ratio = MACRO_RATIOS[parsed_goal]
    return MacroTargets(
        calories=calories,
        protein=round(calories * ratio.protein / CALORIES_PER_GRAM["protein"]),
        carbs=round(calories * ratio.carbs / CALORIES_PER_GRAM["carbs"]),
        fats=round(calories * ratio.fats / CALORIES_PER_GRAM["fats"]),
    )


def macro_percentages(targets: MacroTargets) -> MacroPercentages:
    """Return the share of calories each macro contributes, in percent."""
    if targets.calories == 0:
        return MacroPercentages(protein=0, carbs=0, fats=0)
    return MacroPercentages(
        protein=_percent(targets.protein, "protein", targets.calories),
        carbs=_percent(targets.carbs, "carbs", targets.calories),
        fats=_percent(targets.fats, "fats", targets.calories),
    )


def validate_macros(targets: MacroTargets) -> MacroValidation:
    """Check macro percentages against recommended ranges."""
    percentages = macro_percentages(targets)
    warnings: list[str] = []
    for name, value in (
        ("protein", percentages.protein),
        ("fats", percentages.fats),
        ("carbs", percentages.carbs),
    ):
        low, high = _RECOMMENDED_RANGES[name]
        label = name.capitalize()
        if value < low:
            warnings.append(f"{label} below recommended minimum ({low}%)")
        if value > high:
            warnings.append(f"{label} exceeds recommended maximum ({high}%)")
    return MacroValidation(is_valid=not warnings, warnings=warnings)


def _percent(grams: int, macro: str, calories: int) -> int:
    return round(grams * CALORIES_PER_GRAM[macro] / calories * 100)
