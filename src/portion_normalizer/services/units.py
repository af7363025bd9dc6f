"""Unit allow-list and default conversion rules."""

from dataclasses import dataclass

from portion_normalizer.domain.foods import Food

DEFAULT_BASE_QUANTITY_G = 100.0

RECOGNIZED_UNITS = frozenset(
    {
        "mg",
        "g",
        "kg",
        "ml",
        "l",
        "tsp",
        "tbsp",
        "cup",
        "oz",
        "lb",
        "unidad",
        "porción",
        "rebanada",
        "pieza",
        "taza",
        "vaso",
        "lonja",
        "filete",
        "puñado",
        "cucharada",
        "hoja",
        "bola",
    }
)

GRAM_ALIASES = frozenset({"g", "gram", "grams", "gramo", "gramos"})

_MASS_FACTORS = {
    "g": 1.0,
    "gramo": 1.0,
    "gramos": 1.0,
    "kg": 1000.0,
    "kilogramo": 1000.0,
    "kilogramos": 1000.0,
    "mg": 0.001,
    "miligramo": 0.001,
    "miligramos": 0.001,
}


def normalize_unit(unit: str) -> str:
    """Return the lookup form of a unit token."""
    return unit.strip().lower()


@dataclass(frozen=True)
class UnitCatalog:
    """Pure rules for unit validity and fallback grams-per-unit factors."""

    default_base_quantity_g: float = DEFAULT_BASE_QUANTITY_G

    def is_recognized(self, unit: str) -> bool:
        """Return True when the (already lowercased) unit is allowed."""
        return unit in RECOGNIZED_UNITS

    def default_factor(self, unit: str, food: Food) -> float:
        """Return grams per one unit when no equivalence is stored.

        Mass units map to fixed constants regardless of the food. Any other
        unit is treated as one natural portion of the food, worth its base
        quantity in grams.
        """
        fixed = _MASS_FACTORS.get(unit)
        if fixed is not None:
            return fixed
        return self.base_quantity(food)

    def base_quantity(self, food: Food) -> float:
        """Return the food's base quantity, or the default when unusable."""
        if food.base_quantity_g is not None and food.base_quantity_g > 0:
            return float(food.base_quantity_g)
        return self.default_base_quantity_g
