"""Profile and preference endpoints for the signed-in user."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from prepgenie.api.models import ProfileResponse
from prepgenie.domain.models import UserIdentity  # noqa: TC001
from prepgenie.domain.profiles import LocalePreferences, ProfileForm  # noqa: TC001
from prepgenie.services.preferences import render_profile

if TYPE_CHECKING:
    from prepgenie.containers import AppContainer
    from prepgenie.domain.profiles import UserProfileRecord

router = APIRouter(tags=["profile"])

_BEARER_PREFIX = "bearer "


def _container(request: Request) -> AppContainer:
    return request.app.state.container


async def current_user(
    request: Request, authorization: str | None = Header(default=None)
) -> UserIdentity:
    """Resolve the bearer token in the Authorization header to a user."""
    token = None
    if authorization and authorization.lower().startswith(_BEARER_PREFIX):
        token = authorization[len(_BEARER_PREFIX) :].strip()
    return _container(request).user_service.authenticate(token)


@router.get("/profile")
async def get_profile(
    request: Request, user: UserIdentity = Depends(current_user)
) -> ProfileResponse:
    """Return the signed-in user's profile."""
    profile = _container(request).profile_service.get_profile(user.id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return _serialize_profile(profile)


@router.put("/profile")
async def update_profile(
    form: ProfileForm, request: Request, user: UserIdentity = Depends(current_user)
) -> ProfileResponse:
    """Validate the profile, recompute targets and store it."""
    profile = _container(request).profile_service.save_profile(user.id, form)
    return _serialize_profile(profile)


@router.get("/profile/display")
async def display_profile(
    request: Request, user: UserIdentity = Depends(current_user)
) -> dict[str, str]:
    """Return profile values formatted for the user's locale and units."""
    container = _container(request)
    profile = container.profile_service.get_profile(user.id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    preferences = container.preferences_service.get_preferences(user.id)
    return render_profile(profile, preferences)


@router.get("/preferences")
async def get_preferences(
    request: Request, user: UserIdentity = Depends(current_user)
) -> LocalePreferences:
    """Return the user's locale preferences."""
    return _container(request).preferences_service.get_preferences(user.id)


@router.put("/preferences")
async def update_preferences(
    preferences: LocalePreferences,
    request: Request,
    user: UserIdentity = Depends(current_user),
) -> LocalePreferences:
    """Store the user's locale preferences."""
    return _container(request).preferences_service.update_preferences(
        user.id, preferences
    )


def _serialize_profile(profile: UserProfileRecord) -> ProfileResponse:
    targets = profile.targets
    return ProfileResponse(
        user_id=str(profile.user_id),
        age=profile.age,
        weight=profile.weight,
        height=profile.height,
        gender=profile.gender,
        activity_level=profile.activity_level,
        goal=profile.goal,
        dietary_preference=profile.dietary_preference,
        allergies=profile.allergies,
        budget_level=profile.budget_level,
        cooking_skill_level=profile.cooking_skill_level,
        time_available=profile.time_available,
        tdee=targets.tdee,
        daily_calorie_target=targets.daily_calorie_target,
        target_protein=targets.target_protein,
        target_carbs=targets.target_carbs,
        target_fats=targets.target_fats,
    )
