"""Supabase repository for food registrations."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from portion_normalizer.adapters.supabase_errors import store_errors
from portion_normalizer.domain.errors import StoreUnavailableError
from portion_normalizer.domain.foods import NormalizedQuantity
from portion_normalizer.domain.registrations import FoodRegistration
from portion_normalizer.services.registrations import RegistrationRepository


@dataclass
class SupabaseRegistrationRepository(RegistrationRepository):
    """Supabase implementation for food registrations."""

    client: Client

    def create_registration(  # noqa: PLR0913
        self,
        user_id: UUID,
        food_id: UUID,
        quantity: NormalizedQuantity,
        unit: str,
        meal_moment: str | None,
        consumed_at: datetime,
    ) -> FoodRegistration:
        """Create a registration row holding normalized and original values."""
        with store_errors("create registration"):
            response = (
                self.client.table("food_registrations")
                .insert(
                    {
                        "user_id": str(user_id),
                        "food_id": str(food_id),
                        "quantity_g": quantity.quantity_in_grams,
                        "unit": unit,
                        "original_quantity": quantity.original_quantity,
                        "original_unit": quantity.original_unit,
                        "meal_moment": meal_moment,
                        "consumed_at": consumed_at.isoformat(),
                    }
                )
                .execute()
            )
        if not response.data:
            raise StoreUnavailableError("Failed to create registration")
        return parse_registration(response.data[0])


def parse_registration(row: dict[str, object]) -> FoodRegistration:
    """Parse a registration row into a domain model."""
    return FoodRegistration(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        food_id=UUID(str(row["food_id"])),
        quantity_g=float(row.get("quantity_g", 0.0)),
        unit=str(row.get("unit", "")),
        original_quantity=float(row.get("original_quantity", 0.0)),
        original_unit=str(row.get("original_unit", "")),
        meal_moment=row.get("meal_moment"),
        consumed_at=datetime.fromisoformat(str(row["consumed_at"])),
    )
