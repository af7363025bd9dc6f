"""Domain models for food registrations and their statistics."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class FoodRegistration:
    """A stored food consumption entry."""

    id: UUID
    user_id: UUID
    food_id: UUID
    quantity_g: float
    unit: str
    original_quantity: float
    original_unit: str
    meal_moment: str | None
    consumed_at: datetime


@dataclass(frozen=True)
class DailyIntake:
    """Grams consumed by a user on one day."""

    user_id: UUID
    day: date
    total_grams: float
    registrations: int


@dataclass(frozen=True)
class MonthlyIntake:
    """Grams consumed by a user over one calendar month."""

    user_id: UUID
    year: int
    month: int
    total_grams: float
    registrations: int
