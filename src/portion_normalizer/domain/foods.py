"""Domain models for foods and unit equivalences."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Food:
    """Food catalog entry as seen by the normalizer."""

    id: UUID
    name: str
    base_quantity_g: float | None = None


@dataclass(frozen=True)
class EquivalenceEntry:
    """Cached conversion factor for one food and origin unit."""

    id: UUID
    food_id: UUID
    origin_unit: str
    destination_unit: str
    factor: float


@dataclass(frozen=True)
class NormalizedQuantity:
    """Quantity converted to the canonical unit, with the original kept."""

    quantity_in_grams: float
    original_quantity: float
    original_unit: str
