"""Food catalog lookups."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from portion_normalizer.domain.errors import NotFoundError
from portion_normalizer.domain.foods import Food


class FoodRepository(Protocol):
    """Read-only access to the food catalog."""

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""


@dataclass
class FoodService:
    """Application service for food lookups."""

    repository: FoodRepository

    def get_food(self, food_id: UUID) -> Food:
        """Return the food or raise NotFoundError."""
        food = self.repository.get_food(food_id)
        if food is None:
            raise NotFoundError(f"Food {food_id} not found")
        return food
