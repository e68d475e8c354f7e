"""Pydantic models for API requests and responses."""

from typing import Literal

from pydantic import BaseModel

from prepgenie.domain.nutrition import Gender


class TargetsRequest(BaseModel):
    """Biometrics and goal for a stateless target calculation."""

    age: int
    weight: float
    height: float
    gender: Gender
    activity_level: str
    goal: str


class MacroPercentagesResponse(BaseModel):
    """Percent of calories per macro."""

    protein: int
    carbs: int
    fats: int


class TargetsResponse(BaseModel):
    """Daily targets with macro breakdown."""

    tdee: int
    daily_calorie_target: int
    target_protein: int
    target_carbs: int
    target_fats: int
    percentages: MacroPercentagesResponse
    warnings: list[str]


class ConversionRequest(BaseModel):
    """Unit conversion request."""

    kind: Literal["weight", "height", "volume"]
    value: float
    from_unit: str
    to_unit: str


class ConversionResponse(BaseModel):
    """Unit conversion result."""

    value: float


class ProfileResponse(BaseModel):
    """Stored profile with its targets."""

    user_id: str
    age: int
    weight: float
    height: float
    gender: str
    activity_level: str
    goal: str
    dietary_preference: str
    allergies: list[str]
    budget_level: str | None
    cooking_skill_level: str | None
    time_available: int | None
    tdee: int
    daily_calorie_target: int
    target_protein: int
    target_carbs: int
    target_fats: int
