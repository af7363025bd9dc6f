"""Admin API endpoints with simple token auth."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from portion_normalizer.api.models import EquivalenceRequest, EquivalenceResponse

if TYPE_CHECKING:
    from portion_normalizer.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.put(
    "/equivalences",
    dependencies=[Depends(require_admin)],
    response_model=EquivalenceResponse,
)
def declare_equivalence(
    payload: EquivalenceRequest, request: Request
) -> EquivalenceResponse:
    """Create or correct the conversion factor for a food and unit."""
    container: AppContainer = request.app.state.container
    entry = container.equivalence_service.declare_equivalence(
        food_id=payload.food_id,
        origin_unit=payload.origin_unit,
        destination_unit=payload.destination_unit,
        factor=payload.factor,
    )
    return EquivalenceResponse(**asdict(entry))
