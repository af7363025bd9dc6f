"""Pydantic models for request and response payloads."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class NormalizeRequest(BaseModel):
    """Quantity to normalize for a food."""

    quantity: float
    unit: str


class RegistrationRequest(BaseModel):
    """Food consumption entry submitted by a client."""

    user_id: UUID
    food_id: UUID
    quantity: float
    unit: str
    meal_moment: str | None = None


class EquivalenceRequest(BaseModel):
    """Conversion factor declaration."""

    food_id: UUID
    origin_unit: str
    destination_unit: str | None = None
    factor: float


class NormalizedQuantityResponse(BaseModel):
    """Quantity expressed in grams plus the original values."""

    quantity_in_grams: float
    original_quantity: float
    original_unit: str


class FactorResponse(BaseModel):
    """Resolved grams-per-unit factor."""

    food_id: UUID
    unit: str
    factor: float


class EquivalenceResponse(BaseModel):
    """Stored equivalence entry."""

    id: UUID
    food_id: UUID
    origin_unit: str
    destination_unit: str
    factor: float


class RegistrationResponse(BaseModel):
    """Stored food registration."""

    id: UUID
    user_id: UUID
    food_id: UUID
    quantity_g: float
    unit: str
    original_quantity: float
    original_unit: str
    meal_moment: str | None = None
    consumed_at: datetime


class UnitsResponse(BaseModel):
    """Origin units with a declared equivalence for a food."""

    food_id: UUID
    units: list[str] = Field(default_factory=list)
