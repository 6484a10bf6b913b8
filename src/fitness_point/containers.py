"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from fitness_point.adapters.json_fitness_content import load_fitness_content
from fitness_point.adapters.json_food_catalog import JsonFoodCatalog
from fitness_point.adapters.supabase_food_repository import SupabaseFoodRepository
from fitness_point.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from fitness_point.config import Settings
from fitness_point.services.calories import CalorieService
from fitness_point.services.catalog import CatalogService, FoodCatalog
from fitness_point.services.fitness import FitnessService
from fitness_point.services.meal_plans import MealPlanService
from fitness_point.services.profiles import ProfileService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService
    calorie_service: CalorieService
    meal_plan_service: MealPlanService
    fitness_service: FitnessService
    profile_service: ProfileService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    catalog: FoodCatalog
    if resolved_settings.food_catalog_source == "supabase":
        catalog = SupabaseFoodRepository(supabase_client)
    else:
        catalog = JsonFoodCatalog.load(resolved_settings.foods_path)
    catalog_service = CatalogService(catalog)

    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        calorie_service=CalorieService(),
        meal_plan_service=MealPlanService(catalog_service),
        fitness_service=FitnessService(
            load_fitness_content(resolved_settings.fitness_content_path)
        ),
        profile_service=ProfileService(SupabaseProfileRepository(supabase_client)),
    )
