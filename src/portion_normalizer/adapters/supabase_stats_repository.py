"""Supabase repository for intake statistics."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from portion_normalizer.adapters.supabase_errors import store_errors
from portion_normalizer.adapters.supabase_registration_repository import (
    parse_registration,
)
from portion_normalizer.domain.registrations import (
    DailyIntake,
    FoodRegistration,
    MonthlyIntake,
)
from portion_normalizer.services.stats import StatsRepository


@dataclass
class SupabaseStatsRepository(StatsRepository):
    """Supabase implementation for statistics queries and writes."""

    client: Client

    def list_registrations(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodRegistration]:
        """Return registrations consumed in the time range."""
        with store_errors("list registrations"):
            response = (
                self.client.table("food_registrations")
                .select("*")
                .eq("user_id", str(user_id))
                .gte("consumed_at", start.isoformat())
                .lt("consumed_at", end.isoformat())
                .order("consumed_at", desc=False)
                .execute()
            )
        return [parse_registration(row) for row in response.data or []]

    def upsert_daily(self, intake: DailyIntake) -> None:
        """Store the daily totals for a user and day."""
        with store_errors("upsert daily stats"):
            self.client.table("daily_stats").upsert(
                {
                    "user_id": str(intake.user_id),
                    "day": intake.day.isoformat(),
                    "total_grams": intake.total_grams,
                    "registrations": intake.registrations,
                },
                on_conflict="user_id,day",
            ).execute()

    def upsert_monthly(self, intake: MonthlyIntake) -> None:
        """Store the monthly totals for a user and month."""
        with store_errors("upsert monthly stats"):
            self.client.table("monthly_stats").upsert(
                {
                    "user_id": str(intake.user_id),
                    "year": intake.year,
                    "month": intake.month,
                    "total_grams": intake.total_grams,
                    "registrations": intake.registrations,
                },
                on_conflict="user_id,year,month",
            ).execute()
