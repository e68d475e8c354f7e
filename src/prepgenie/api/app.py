"""FastAPI application factory."""

import logging

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from prepgenie.api.models import (
    ConversionRequest,
    ConversionResponse,
    MacroPercentagesResponse,
    TargetsRequest,
    TargetsResponse,
)
from prepgenie.api.profile import router as profile_router
from prepgenie.app_logging import configure_logging
from prepgenie.containers import AppContainer
from prepgenie.domain.nutrition import (
    ActivityLevel,
    BiometricInput,
    Goal,
    MacroTargets,
    NutritionInputError,
)
from prepgenie.services.energy import compute_energy_profile
from prepgenie.services.macros import macro_percentages, validate_macros
from prepgenie.services.units import convert_height, convert_volume, convert_weight
from prepgenie.services.users import AuthenticationError

_UNITS = {
    "weight": ({"kg", "lb"}, convert_weight),
    "height": ({"cm", "ft_in"}, convert_height),
    "volume": ({"ml", "cups_us", "cups_jp"}, convert_volume),
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="PrepGenie")
    app.state.container = container

    app.include_router(profile_router)

    @app.exception_handler(NutritionInputError)
    async def nutrition_input_error(
        request: Request, exc: NutritionInputError
    ) -> JSONResponse:
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
        )

    @app.exception_handler(AuthenticationError)
    async def authentication_error(
        request: Request, exc: AuthenticationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": str(exc)},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/nutrition/targets")
    async def nutrition_targets(payload: TargetsRequest) -> TargetsResponse:
        """Compute daily targets without touching any stored profile."""
        biometrics = BiometricInput(
            age=payload.age,
            weight_kg=payload.weight,
            height_cm=payload.height,
            gender=payload.gender,
            activity_level=ActivityLevel.parse(payload.activity_level),
        )
        profile = compute_energy_profile(biometrics, Goal.parse(payload.goal))
        macros = MacroTargets(
            calories=profile.daily_calorie_target,
            protein=profile.target_protein,
            carbs=profile.target_carbs,
            fats=profile.target_fats,
        )
        percentages = macro_percentages(macros)
        return TargetsResponse(
            tdee=profile.tdee,
            daily_calorie_target=profile.daily_calorie_target,
            target_protein=profile.target_protein,
            target_carbs=profile.target_carbs,
            target_fats=profile.target_fats,
            percentages=MacroPercentagesResponse(
                protein=percentages.protein,
                carbs=percentages.carbs,
                fats=percentages.fats,
            ),
            warnings=validate_macros(macros).warnings,
        )

    @app.post("/units/convert")
    async def convert_units(payload: ConversionRequest) -> ConversionResponse:
        """Convert a weight, height or volume between supported units."""
        allowed, convert = _UNITS[payload.kind]
        if payload.from_unit not in allowed or payload.to_unit not in allowed:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unsupported {payload.kind} unit",
            )
        return ConversionResponse(
            value=convert(payload.value, payload.from_unit, payload.to_unit)
        )

    return app
