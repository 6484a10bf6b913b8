"""Food catalog access and dietary filtering."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from fitness_point.domain.foods import FoodItem

_logger = logging.getLogger(__name__)


class FoodCatalog(Protocol):
    """Read-only source of catalog foods."""

    def list_foods(self) -> list[FoodItem]:
        """Return every food in the catalog."""


@dataclass
class CatalogService:
    """Service for reading and filtering the food catalog."""

    catalog: FoodCatalog

    def list_foods(self) -> list[FoodItem]:
        """Return the whole catalog."""
        return self.catalog.list_foods()

    def filter_by_tags(self, tags: Iterable[str]) -> tuple[list[FoodItem], bool]:
        """Return foods matching any tag, or the whole catalog when none match.

        A tag matches when it is a case-insensitive substring of one of the
        food's dietary tags. The second element is True when the whole
        catalog was returned because nothing matched.
        """
        wanted = [tag.strip().lower() for tag in tags]
        foods = self.catalog.list_foods()
        matched = [food for food in foods if _matches_any(food, wanted)]
        if matched:
            return matched, False
        _logger.warning(
            "No foods match dietary preferences %s; using the full catalog", wanted
        )
        return foods, True


def _matches_any(food: FoodItem, wanted: list[str]) -> bool:
    return any(tag in food_tag for tag in wanted for food_tag in food.dietary_tags)
