"""Tests for configuration helpers."""

import pytest

from prepgenie.config import parse_locale


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("ja", "ja"),
        ("ja-JP", "ja"),
        ("EN_us", "en"),
        ("fr", "en"),
        ("", "en"),
        (None, "en"),
    ],
)
def test_parse_locale(raw: str | None, expected: str) -> None:
    assert parse_locale(raw) == expected
