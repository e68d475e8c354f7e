"""Unit conversions and locale-aware display formatting."""

import math
from typing import Literal

WeightUnit = Literal["kg", "lb"]
HeightUnit = Literal["cm", "ft_in"]
VolumeUnit = Literal["ml", "cups_us", "cups_jp"]

KG_PER_LB = 0.453592
LB_PER_KG = 2.20462
CM_PER_INCH = 2.54
INCHES_PER_FOOT = 12
US_CUP_ML = 240
JAPANESE_CUP_ML = 200
MINUTES_PER_HOUR = 60


def pounds_to_kilograms(lbs: float) -> float:
    """Convert pounds to kilograms, rounded to two decimals."""
    return round(lbs * KG_PER_LB, 2)


def kilograms_to_pounds(kg: float) -> float:
    """Convert kilograms to pounds, rounded to two decimals."""
    return round(kg * LB_PER_KG, 2)


def inches_to_centimeters(inches: float) -> float:
    """Convert inches to centimeters, rounded to two decimals."""
    return round(inches * CM_PER_INCH, 2)


def centimeters_to_inches(cm: float) -> float:
    """Convert centimeters to inches, rounded to two decimals."""
    return round(cm / CM_PER_INCH, 2)


def milliliters_to_us_cups(ml: float) -> float:
    return ml / US_CUP_ML


def milliliters_to_jp_cups(ml: float) -> float:
    return ml / JAPANESE_CUP_ML


def us_cups_to_milliliters(cups: float) -> float:
    return cups * US_CUP_ML


def jp_cups_to_milliliters(cups: float) -> float:
    return cups * JAPANESE_CUP_ML


def convert_weight(value: float, from_unit: WeightUnit, to_unit: WeightUnit) -> float:
    """Convert a weight between kg and lb."""
    if from_unit == to_unit:
        return value
    if from_unit == "kg":
        return value * LB_PER_KG
    return value / LB_PER_KG


def convert_height(value: float, from_unit: HeightUnit, to_unit: HeightUnit) -> float:
    """Convert a height between cm and feet/inches.

    Feet and inches are encoded as ``feet + inches / 100``, so 5.11 means
    5 ft 11 in.
    """
    if from_unit == to_unit:
        return value
    if from_unit == "cm":
        feet, inches = _split_feet_inches(value)
        return feet + inches / 100
    feet = math.floor(value)
    inches = round((value - feet) * 100)
    return (feet * INCHES_PER_FOOT + inches) * CM_PER_INCH


def convert_volume(value: float, from_unit: VolumeUnit, to_unit: VolumeUnit) -> float:
    """Convert a volume between mL, US cups and Japanese cups."""
    if from_unit == to_unit:
        return value
    ml = value
    if from_unit == "cups_us":
        ml = us_cups_to_milliliters(value)
    elif from_unit == "cups_jp":
        ml = jp_cups_to_milliliters(value)

    if to_unit == "cups_us":
        return milliliters_to_us_cups(ml)
    if to_unit == "cups_jp":
        return milliliters_to_jp_cups(ml)
    return ml


def cup_size_ml(locale: str) -> int:
    """Return the culinary cup size for a locale."""
    return JAPANESE_CUP_ML if locale == "ja" else US_CUP_ML


def format_calories(calories: float) -> str:
    """Format calories with thousands separators, e.g. ``1,234 kcal``."""
    return f"{round(calories):,} kcal"


def format_grams(grams: float) -> str:
    return f"{round(grams)}g"


def format_weight(weight_kg: float, unit: WeightUnit = "kg") -> str:
    """Format a weight stored in kg in the requested unit."""
    if unit == "lb":
        return f"{convert_weight(weight_kg, 'kg', 'lb'):.1f} lb"
    return f"{weight_kg:.1f} kg"


def format_height(height_cm: float, unit: HeightUnit = "cm") -> str:
    """Format a height stored in cm, e.g. ``175 cm`` or ``5'9"``."""
    if unit == "ft_in":
        feet, inches = _split_feet_inches(height_cm)
        return f"{feet}'{inches}\""
    return f"{str(height_cm).removesuffix('.0')} cm"


def format_volume(value: float, unit: Literal["ml", "cups"], locale: str) -> str:
    """Format a cooking volume, noting the locale's cup size for cups."""
    if unit == "cups":
        label = "カップ" if locale == "ja" else "cups"
        return f"{value:g} {label} ({cup_size_ml(locale)}mL)"
    return f"{value:g} mL"


def format_minutes(minutes: int) -> str:
    """Format a duration, e.g. ``45 mins`` or ``1h 30m``."""
    if minutes < MINUTES_PER_HOUR:
        return f"{minutes} mins"
    hours, remaining = divmod(minutes, MINUTES_PER_HOUR)
    return f"{hours}h {remaining}m" if remaining else f"{hours}h"


def _split_feet_inches(height_cm: float) -> tuple[int, int]:
    total_inches = height_cm / CM_PER_INCH
    feet = math.floor(total_inches / INCHES_PER_FOOT)
    inches = round(total_inches % INCHES_PER_FOOT)
    if inches == INCHES_PER_FOOT:
        return feet + 1, 0
    return feet, inches
