"""Daily and monthly intake statistics."""

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol
from uuid import UUID

from portion_normalizer.domain.registrations import (
    DailyIntake,
    FoodRegistration,
    MonthlyIntake,
)

DECEMBER = 12


class StatsRepository(Protocol):
    """Persistence interface for intake statistics."""

    def list_registrations(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodRegistration]:
        """Return registrations consumed within a time range."""

    def upsert_daily(self, intake: DailyIntake) -> None:
        """Store the daily totals for a user and day."""

    def upsert_monthly(self, intake: MonthlyIntake) -> None:
        """Store the monthly totals for a user and month."""


@dataclass
class StatsService:
    """Recomputes intake totals when registrations are saved."""

    repository: StatsRepository

    def on_registration_saved(self, user_id: UUID, day: date) -> None:
        """Refresh the daily and monthly totals covering ``day``."""
        self.refresh_day(user_id, day)
        self.refresh_month(user_id, day.year, day.month)

    def refresh_day(self, user_id: UUID, day: date) -> DailyIntake:
        """Recompute and store totals for one day."""
        start = datetime.combine(day, time.min, tzinfo=UTC)
        end = start + timedelta(days=1)
        registrations = self.repository.list_registrations(user_id, start, end)
        intake = DailyIntake(
            user_id=user_id,
            day=day,
            total_grams=_total_grams(registrations),
            registrations=len(registrations),
        )
        self.repository.upsert_daily(intake)
        return intake

    def refresh_month(self, user_id: UUID, year: int, month: int) -> MonthlyIntake:
        """Recompute and store totals for one calendar month."""
        start = datetime(year, month, 1, tzinfo=UTC)
        if month == DECEMBER:
            end = start.replace(year=year + 1, month=1)
        else:
            end = start.replace(month=month + 1)
        registrations = self.repository.list_registrations(user_id, start, end)
        intake = MonthlyIntake(
            user_id=user_id,
            year=year,
            month=month,
            total_grams=_total_grams(registrations),
            registrations=len(registrations),
        )
        self.repository.upsert_monthly(intake)
        return intake


def _total_grams(registrations: list[FoodRegistration]) -> float:
    return sum(registration.quantity_g for registration in registrations)
