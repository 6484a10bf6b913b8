"""Supabase-backed food catalog."""

from dataclasses import dataclass, field

from supabase import Client

from fitness_point.adapters.json_food_catalog import parse_food_row
from fitness_point.domain.foods import FoodItem
from fitness_point.services.catalog import FoodCatalog

_COLUMNS = "id, name, calories, protein, carbs, fat, serving_size, dietary_tags"


@dataclass
class SupabaseFoodRepository(FoodCatalog):
    """Reads the ``foods`` table once and serves it from memory."""

    client: Client
    _foods: list[FoodItem] | None = field(default=None, init=False, repr=False)

    def list_foods(self) -> list[FoodItem]:
        """Return every food in the catalog."""
        if self._foods is None:
            response = (
                self.client.table("foods")
                .select(_COLUMNS)
                .order("id")
                .execute()
            )
            self._foods = [parse_food_row(row) for row in response.data or []]
        return list(self._foods)
