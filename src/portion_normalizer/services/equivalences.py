"""Conversion factor resolution and race-safe equivalence upserts."""

import logging
import math
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from portion_normalizer.domain.errors import (
    ConflictError,
    InvalidFactorError,
    InvalidUnitError,
    UpsertFailedError,
)
from portion_normalizer.domain.foods import EquivalenceEntry, Food
from portion_normalizer.services.foods import FoodService
from portion_normalizer.services.units import (
    GRAM_ALIASES,
    UnitCatalog,
    normalize_unit,
)

CANONICAL_UNIT = "gramos"

logger = logging.getLogger(__name__)


class EquivalenceRepository(Protocol):
    """Persistence interface for per-food unit equivalences.

    Implementations must make ``insert`` fail atomically with
    ``ConflictError`` when the (food, origin, destination) key exists.
    """

    def find(
        self, food_id: UUID, origin_unit: str, destination_unit: str
    ) -> EquivalenceEntry | None:
        """Return the entry for an exact key, if present."""

    def insert(
        self, food_id: UUID, origin_unit: str, destination_unit: str, factor: float
    ) -> EquivalenceEntry:
        """Create an entry and return it."""

    def update(self, entry_id: UUID, factor: float) -> EquivalenceEntry:
        """Replace the factor of an existing entry and return it."""

    def list_origin_units(self, food_id: UUID) -> list[str]:
        """Return origin units declared for a food."""


@dataclass
class UnitResolver:
    """Resolves grams-per-unit factors, preferring stored equivalences."""

    repository: EquivalenceRepository
    catalog: UnitCatalog = field(default_factory=UnitCatalog)
    canonical_unit: str = CANONICAL_UNIT

    def resolve_factor(self, food: Food, origin_unit: str) -> float:
        """Return grams per one ``origin_unit`` of ``food``.

        A stored equivalence always wins over the catalog default. Nothing is
        written back when the default is used.
        """
        _, factor = self.resolve(food, origin_unit)
        return factor

    def resolve(self, food: Food, origin_unit: str) -> tuple[str, float]:
        """Return the normalized unit together with its factor."""
        unit = normalize_unit(origin_unit)
        if not self.catalog.is_recognized(unit):
            raise InvalidUnitError(unit)
        entry = self.repository.find(food.id, unit, self.canonical_unit)
        if entry is not None:
            return unit, entry.factor
        return unit, self.catalog.default_factor(unit, food)

    def destination_for(self, unit: str | None) -> str:
        """Return the stored form of a destination unit.

        ``None`` stands for the canonical unit.
        """
        if unit is None:
            return self.canonical_unit
        normalized = normalize_unit(unit)
        if normalized in GRAM_ALIASES:
            return self.canonical_unit
        return normalized


@dataclass
class EquivalenceService:
    """Application service for declaring and resolving equivalences."""

    repository: EquivalenceRepository
    food_service: FoodService
    resolver: UnitResolver

    def resolve_factor(self, food_id: UUID, unit: str) -> float:
        """Resolve the factor for a food id and unit."""
        food = self.food_service.get_food(food_id)
        return self.resolver.resolve_factor(food, unit)

    def declare_equivalence(
        self,
        food_id: UUID,
        origin_unit: str,
        destination_unit: str | None,
        factor: float,
    ) -> EquivalenceEntry:
        """Declare a factor for a food id, creating or updating the entry."""
        food = self.food_service.get_food(food_id)
        return self.declare(food, origin_unit, destination_unit, factor)

    def declare(
        self,
        food: Food,
        origin_unit: str,
        destination_unit: str | None,
        factor: float,
    ) -> EquivalenceEntry:
        """Create or update the equivalence for a key.

        Two callers may both see no entry and both insert. The store lets
        exactly one insert win; the loser re-reads once and applies its own
        factor to the winner's row.
        """
        origin = normalize_unit(origin_unit)
        destination = self.resolver.destination_for(destination_unit)
        if not origin:
            raise InvalidUnitError(origin_unit)
        if not destination:
            raise InvalidUnitError(destination)
        if not math.isfinite(factor) or factor <= 0:
            raise InvalidFactorError(factor)

        existing = self.repository.find(food.id, origin, destination)
        if existing is not None:
            return self._update(existing, factor)

        try:
            created = self.repository.insert(food.id, origin, destination, factor)
        except ConflictError as exc:
            logger.info(
                "Equivalence %s -> %s for food %s was created concurrently",
                origin,
                destination,
                food.id,
            )
            winner = self.repository.find(food.id, origin, destination)
            if winner is None:
                raise UpsertFailedError(
                    f"Equivalence {origin} -> {destination} for food {food.id} "
                    "conflicted on insert but could not be read back"
                ) from exc
            return self._update(winner, factor)

        logger.info(
            "Created equivalence %s -> %s = %s for food %s",
            origin,
            destination,
            factor,
            food.id,
        )
        return created

    def list_units(self, food_id: UUID) -> list[str]:
        """Return the origin units with a stored equivalence for a food."""
        self.food_service.get_food(food_id)
        units = self.repository.list_origin_units(food_id)
        logger.info("Declared units for food %s: %s", food_id, units)
        return units

    def _update(self, entry: EquivalenceEntry, factor: float) -> EquivalenceEntry:
        updated = self.repository.update(entry.id, factor)
        logger.info(
            "Updated equivalence %s -> %s for food %s: %s -> %s",
            entry.origin_unit,
            entry.destination_unit,
            entry.food_id,
            entry.factor,
            factor,
        )
        return updated
