"""Food catalog loaded from a JSON file."""

import json
from dataclasses import dataclass
from pathlib import Path

from fitness_point.domain.foods import FoodItem
from fitness_point.services.catalog import FoodCatalog

DEFAULT_FOODS_PATH = Path(__file__).resolve().parents[1] / "data" / "foods.json"


@dataclass(frozen=True)
class JsonFoodCatalog(FoodCatalog):
    """Immutable catalog read once from a JSON list of foods."""

    foods: tuple[FoodItem, ...]

    @classmethod
    def load(cls, path: Path | None = None) -> "JsonFoodCatalog":
        """Load the catalog from a file, defaulting to the packaged data."""
        rows = json.loads((path or DEFAULT_FOODS_PATH).read_text(encoding="utf-8"))
        return cls(foods=tuple(parse_food_row(row) for row in rows))

    def list_foods(self) -> list[FoodItem]:
        """Return every food in the catalog."""
        return list(self.foods)


def parse_food_row(row: dict[str, object]) -> FoodItem:
    """Parse a food row; tags may be a list or a comma-separated string."""
    raw_tags = row.get("dietary_tags") or []
    if isinstance(raw_tags, str):
        raw_tags = raw_tags.split(",")
    return FoodItem(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        calories=int(row.get("calories", 0)),
        protein_g=float(row.get("protein", 0.0)),
        carbs_g=float(row.get("carbs", 0.0)),
        fat_g=float(row.get("fat", 0.0)),
        serving_size=str(row.get("serving_size", "")),
        dietary_tags=tuple(
            tag.strip().lower() for tag in raw_tags if tag and tag.strip()
        ),
    )
