"""Tests for unit conversions and display formatting."""

import pytest

from prepgenie.services.units import (
    centimeters_to_inches,
    convert_height,
    convert_volume,
    convert_weight,
    cup_size_ml,
    format_calories,
    format_grams,
    format_height,
    format_minutes,
    format_volume,
    format_weight,
    inches_to_centimeters,
    jp_cups_to_milliliters,
    kilograms_to_pounds,
    milliliters_to_jp_cups,
    milliliters_to_us_cups,
    pounds_to_kilograms,
    us_cups_to_milliliters,
)


def test_weight_helpers_round_to_two_decimals() -> None:
    assert pounds_to_kilograms(176) == 79.83
    assert kilograms_to_pounds(80) == 176.37
    assert pounds_to_kilograms(0) == 0


def test_weight_helpers_round_trip_within_tolerance() -> None:
    assert pounds_to_kilograms(kilograms_to_pounds(80)) == pytest.approx(80, rel=1e-3)


def test_length_helpers() -> None:
    assert inches_to_centimeters(70) == 177.8
    assert centimeters_to_inches(180) == 70.87


@pytest.mark.parametrize("kg", [45.5, 80, 123.4])
def test_convert_weight_round_trip(kg: float) -> None:
    pounds = convert_weight(kg, "kg", "lb")

    assert convert_weight(pounds, "lb", "kg") == pytest.approx(kg, rel=1e-3)


def test_convert_weight_same_unit_is_identity() -> None:
    assert convert_weight(72.5, "kg", "kg") == 72.5


def test_convert_height_uses_feet_inches_encoding() -> None:
    assert convert_height(180.34, "cm", "ft_in") == pytest.approx(5.11)
    assert convert_height(5.11, "ft_in", "cm") == pytest.approx(180.34)


def test_us_and_japanese_cups_differ() -> None:
    assert milliliters_to_us_cups(480) == 2
    assert milliliters_to_jp_cups(400) == 2
    assert us_cups_to_milliliters(1) == 240
    assert jp_cups_to_milliliters(1) == 200


def test_convert_volume_between_cup_sizes() -> None:
    assert convert_volume(1, "cups_us", "cups_jp") == pytest.approx(1.2)
    assert convert_volume(2, "cups_jp", "ml") == 400
    assert convert_volume(500, "ml", "ml") == 500


def test_cup_size_by_locale() -> None:
    assert cup_size_ml("ja") == 200
    assert cup_size_ml("en") == 240


def test_format_calories_and_grams() -> None:
    assert format_calories(1234) == "1,234 kcal"
    assert format_grams(149.6) == "150g"


def test_format_weight() -> None:
    assert format_weight(75.5) == "75.5 kg"
    assert format_weight(75.5, "lb") == "166.4 lb"


def test_format_height() -> None:
    assert format_height(175) == "175 cm"
    assert format_height(175.0) == "175 cm"
    assert format_height(175.123456) == "175.123456 cm"
    assert format_height(175, "ft_in") == "5'9\""
    assert format_height(182.8, "ft_in") == "6'0\""


def test_format_volume() -> None:
    assert format_volume(2, "cups", "en") == "2 cups (240mL)"
    assert format_volume(2, "cups", "ja") == "2 カップ (200mL)"
    assert format_volume(250, "ml", "en") == "250 mL"


def test_format_minutes() -> None:
    assert format_minutes(45) == "45 mins"
    assert format_minutes(90) == "1h 30m"
    assert format_minutes(120) == "2h"
