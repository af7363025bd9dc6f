"""FastAPI application factory."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import asdict
from uuid import UUID

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from portion_normalizer.api.admin import router as admin_router
from portion_normalizer.api.models import (
    FactorResponse,
    NormalizedQuantityResponse,
    NormalizeRequest,
    RegistrationRequest,
    RegistrationResponse,
    UnitsResponse,
)
from portion_normalizer.app_logging import configure_logging
from portion_normalizer.containers import AppContainer
from portion_normalizer.domain.errors import (
    NotFoundError,
    StoreUnavailableError,
    UpsertFailedError,
    ValidationError,
)
from portion_normalizer.services.units import normalize_unit

_ERROR_STATUS: tuple[tuple[type[Exception], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (UpsertFailedError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container
    app.include_router(admin_router)

    for error_type, status_code in _ERROR_STATUS:
        app.add_exception_handler(error_type, _error_handler(status_code, logger))

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods/{food_id}/factor", response_model=FactorResponse)
    def resolve_factor(food_id: UUID, unit: str, request: Request) -> FactorResponse:
        """Return grams per one unit of a food."""
        state_container: AppContainer = request.app.state.container
        factor = state_container.equivalence_service.resolve_factor(food_id, unit)
        return FactorResponse(food_id=food_id, unit=normalize_unit(unit), factor=factor)

    @app.get("/foods/{food_id}/units", response_model=UnitsResponse)
    def list_units(food_id: UUID, request: Request) -> UnitsResponse:
        """Return units with a declared equivalence for a food."""
        state_container: AppContainer = request.app.state.container
        units = state_container.equivalence_service.list_units(food_id)
        return UnitsResponse(food_id=food_id, units=units)

    @app.post(
        "/foods/{food_id}/normalize", response_model=NormalizedQuantityResponse
    )
    def normalize_quantity(
        food_id: UUID, payload: NormalizeRequest, request: Request
    ) -> NormalizedQuantityResponse:
        """Convert a quantity of a food to grams."""
        state_container: AppContainer = request.app.state.container
        normalized = state_container.registration_service.normalize_quantity(
            food_id, payload.quantity, payload.unit
        )
        return NormalizedQuantityResponse(**asdict(normalized))

    @app.post(
        "/registrations",
        response_model=RegistrationResponse,
        status_code=status.HTTP_201_CREATED,
    )
    def create_registration(
        payload: RegistrationRequest, request: Request
    ) -> RegistrationResponse:
        """Normalize and store a food consumption entry."""
        state_container: AppContainer = request.app.state.container
        registration = state_container.registration_service.register(
            user_id=payload.user_id,
            food_id=payload.food_id,
            quantity=payload.quantity,
            unit=payload.unit,
            meal_moment=payload.meal_moment,
        )
        return RegistrationResponse(**asdict(registration))

    return app


def _error_handler(
    status_code: int, logger: logging.Logger
) -> Callable[[Request, Exception], Awaitable[JSONResponse]]:
    async def handle(_request: Request, exc: Exception) -> JSONResponse:
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("Request failed: %s", exc, exc_info=exc)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    return handle
