"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from portion_normalizer.adapters.supabase_equivalence_repository import (
    SupabaseEquivalenceRepository,
)
from portion_normalizer.adapters.supabase_food_repository import (
    SupabaseFoodRepository,
)
from portion_normalizer.adapters.supabase_registration_repository import (
    SupabaseRegistrationRepository,
)
from portion_normalizer.adapters.supabase_stats_repository import (
    SupabaseStatsRepository,
)
from portion_normalizer.config import Settings
from portion_normalizer.services.equivalences import EquivalenceService, UnitResolver
from portion_normalizer.services.foods import FoodService
from portion_normalizer.services.registrations import (
    RegistrationNormalizer,
    RegistrationService,
)
from portion_normalizer.services.stats import StatsService
from portion_normalizer.services.units import UnitCatalog


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_service: FoodService
    equivalence_service: EquivalenceService
    registration_service: RegistrationService
    stats_service: StatsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    equivalence_repository = SupabaseEquivalenceRepository(supabase_client)
    food_service = FoodService(SupabaseFoodRepository(supabase_client))
    stats_service = StatsService(SupabaseStatsRepository(supabase_client))
    resolver = UnitResolver(
        repository=equivalence_repository,
        catalog=UnitCatalog(
            default_base_quantity_g=resolved_settings.default_base_quantity_g
        ),
        canonical_unit=resolved_settings.canonical_unit,
    )
    equivalence_service = EquivalenceService(
        repository=equivalence_repository,
        food_service=food_service,
        resolver=resolver,
    )
    registration_service = RegistrationService(
        food_service=food_service,
        normalizer=RegistrationNormalizer(resolver),
        repository=SupabaseRegistrationRepository(supabase_client),
        stats_trigger=stats_service,
    )
    return AppContainer(
        settings=resolved_settings,
        food_service=food_service,
        equivalence_service=equivalence_service,
        registration_service=registration_service,
        stats_service=stats_service,
    )
