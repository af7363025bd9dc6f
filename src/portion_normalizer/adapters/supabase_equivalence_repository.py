"""Supabase repository for unit equivalences."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from portion_normalizer.adapters.supabase_errors import store_errors
from portion_normalizer.domain.errors import NotFoundError, StoreUnavailableError
from portion_normalizer.domain.foods import EquivalenceEntry
from portion_normalizer.services.equivalences import EquivalenceRepository

_COLUMNS = "id, food_id, origin_unit, destination_unit, factor"


@dataclass
class SupabaseEquivalenceRepository(EquivalenceRepository):
    """Supabase implementation for unit equivalences.

    Uniqueness of (food_id, origin_unit, destination_unit) is enforced by a
    unique index on ``unit_equivalences``; a colliding insert comes back as a
    PostgREST 23505 error and is raised as ``ConflictError``.
    """

    client: Client

    def find(
        self, food_id: UUID, origin_unit: str, destination_unit: str
    ) -> EquivalenceEntry | None:
        """Return the entry for an exact key, if present."""
        with store_errors("find equivalence"):
            response = (
                self.client.table("unit_equivalences")
                .select(_COLUMNS)
                .eq("food_id", str(food_id))
                .eq("origin_unit", origin_unit)
                .eq("destination_unit", destination_unit)
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return _parse_entry(response.data[0])

    def insert(
        self, food_id: UUID, origin_unit: str, destination_unit: str, factor: float
    ) -> EquivalenceEntry:
        """Create an entry and return it."""
        with store_errors("insert equivalence"):
            response = (
                self.client.table("unit_equivalences")
                .insert(
                    {
                        "food_id": str(food_id),
                        "origin_unit": origin_unit,
                        "destination_unit": destination_unit,
                        "factor": factor,
                    }
                )
                .execute()
            )
        if not response.data:
            raise StoreUnavailableError("Failed to create equivalence")
        return _parse_entry(response.data[0])

    def update(self, entry_id: UUID, factor: float) -> EquivalenceEntry:
        """Replace the factor of an existing entry and return it."""
        with store_errors("update equivalence"):
            response = (
                self.client.table("unit_equivalences")
                .update({"factor": factor})
                .eq("id", str(entry_id))
                .execute()
            )
        if not response.data:
            raise NotFoundError(f"Equivalence {entry_id} not found")
        return _parse_entry(response.data[0])

    def list_origin_units(self, food_id: UUID) -> list[str]:
        """Return origin units declared for a food."""
        with store_errors("list equivalence units"):
            response = (
                self.client.table("unit_equivalences")
                .select("origin_unit")
                .eq("food_id", str(food_id))
                .order("origin_unit", desc=False)
                .execute()
            )
        return [str(row["origin_unit"]) for row in response.data or []]


def _parse_entry(row: dict[str, object]) -> EquivalenceEntry:
    return EquivalenceEntry(
        id=UUID(str(row["id"])),
        food_id=UUID(str(row["food_id"])),
        origin_unit=str(row["origin_unit"]),
        destination_unit=str(row["destination_unit"]),
        factor=float(row["factor"]),
    )
