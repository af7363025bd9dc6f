"""Supabase-backed food catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from portion_normalizer.adapters.supabase_errors import store_errors
from portion_normalizer.domain.foods import Food
from portion_normalizer.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase implementation for food lookups."""

    client: Client

    def get_food(self, food_id: UUID) -> Food | None:
        """Return a food by id, if present."""
        with store_errors("get food"):
            response = (
                self.client.table("foods")
                .select("id, name, base_quantity_g")
                .eq("id", str(food_id))
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        row = response.data[0]
        base_quantity = row.get("base_quantity_g")
        return Food(
            id=UUID(str(row["id"])),
            name=str(row.get("name", "")),
            base_quantity_g=float(base_quantity)
            if isinstance(base_quantity, int | float)
            else None,
        )
