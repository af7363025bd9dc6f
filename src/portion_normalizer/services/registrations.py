"""Quantity normalization and food registration."""

import logging
import math
from dataclasses import dataclass
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import UUID

from portion_normalizer.domain.errors import InvalidQuantityError
from portion_normalizer.domain.foods import Food, NormalizedQuantity
from portion_normalizer.domain.registrations import FoodRegistration
from portion_normalizer.services.equivalences import UnitResolver
from portion_normalizer.services.foods import FoodService

logger = logging.getLogger(__name__)


class RegistrationRepository(Protocol):
    """Persistence interface for food registrations."""

    def create_registration(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_id: UUID,
        quantity: NormalizedQuantity,
        unit: str,
        meal_moment: str | None,
        consumed_at: datetime,
    ) -> FoodRegistration:
        """Persist a registration and return it."""


class StatsTrigger(Protocol):
    """Receives a notification after a registration is saved."""

    def on_registration_saved(self, user_id: UUID, day: date) -> None:
        """Recompute statistics affected by a new registration."""


@dataclass
class RegistrationNormalizer:
    """Converts a user-supplied quantity to grams."""

    resolver: UnitResolver

    def normalize(
        self, food: Food, original_quantity: float, original_unit: str
    ) -> NormalizedQuantity:
        """Return the quantity in grams alongside the original values."""
        if not math.isfinite(original_quantity) or original_quantity <= 0:
            raise InvalidQuantityError(original_quantity)
        unit, factor = self.resolver.resolve(food, original_unit)
        return NormalizedQuantity(
            quantity_in_grams=original_quantity * factor,
            original_quantity=original_quantity,
            original_unit=unit,
        )


@dataclass
class RegistrationService:
    """Normalizes, stores and announces food registrations."""

    food_service: FoodService
    normalizer: RegistrationNormalizer
    repository: RegistrationRepository
    stats_trigger: StatsTrigger

    def normalize_quantity(
        self, food_id: UUID, quantity: float, unit: str
    ) -> NormalizedQuantity:
        """Normalize a quantity for a food id without persisting anything."""
        food = self.food_service.get_food(food_id)
        return self.normalizer.normalize(food, quantity, unit)

    def register(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_id: UUID,
        quantity: float,
        unit: str,
        meal_moment: str | None = None,
    ) -> FoodRegistration:
        """Normalize and persist a registration, then trigger statistics."""
        normalized = self.normalize_quantity(food_id, quantity, unit)
        registration = self.repository.create_registration(
            user_id=user_id,
            food_id=food_id,
            quantity=normalized,
            unit=self.normalizer.resolver.canonical_unit,
            meal_moment=meal_moment,
            consumed_at=datetime.now(tz=UTC),
        )
        logger.info(
            "Saved registration %s: %s %s -> %.3f g",
            registration.id,
            normalized.original_quantity,
            normalized.original_unit,
            normalized.quantity_in_grams,
        )
        try:
            self.stats_trigger.on_registration_saved(
                user_id, registration.consumed_at.date()
            )
        except Exception:
            logger.exception(
                "Failed to refresh statistics after registration %s", registration.id
            )
        return registration
