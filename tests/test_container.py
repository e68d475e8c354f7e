"""Tests for container wiring."""

from dataclasses import fields

from prepgenie.containers import AppContainer, build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.profile_service is not None
    assert container.preferences_service.default_locale == "en"


def test_container_holds_settings_and_services() -> None:
    assert [item.name for item in fields(AppContainer)] == [
        "settings",
        "user_service",
        "profile_service",
        "preferences_service",
    ]
