"""Randomized greedy meal suggestions for a daily calorie target.

Each meal is assembled independently against its share of the daily target:
a protein source, a carb source, a vegetable or fruit, then a fat source,
each picked at random from the foods that still fit the remaining budget.
The result is advisory. Totals can land under or over the sub-budget and
repeated calls with the same input usually differ.
"""

import logging
import math
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Protocol, TypeVar

from fitness_point.domain.foods import FoodItem, Meal, MealItem, MealPlan
from fitness_point.errors import ValidationError
from fitness_point.services.calories import round_half_up
from fitness_point.services.catalog import CatalogService

T = TypeVar("T")

MEAL_SPLITS = (
    ("breakfast", "Breakfast", 0.25),
    ("lunch", "Lunch", 0.35),
    ("dinner", "Dinner", 0.30),
    ("snacks", "Snacks", 0.10),
)

VEGETABLE_NAME_HINTS = ("vegetable", "broccoli", "spinach")

_logger = logging.getLogger(__name__)


class Selector(Protocol):
    """Source of random picks; ``random.Random`` satisfies it."""

    def choice(self, seq: Sequence[T]) -> T:
        """Return one element of a non-empty sequence."""


@dataclass
class MealPlanService:
    """Builds meal plans from the food catalog."""

    catalog_service: CatalogService
    selector: Selector = field(default_factory=random.Random)

    def suggest(
        self, target_calories: float | None, dietary_preferences: list[str] | None
    ) -> MealPlan:
        """Return a four-meal plan for the daily target and dietary tags."""
        if (
            target_calories is None
            or not math.isfinite(target_calories)
            or target_calories <= 0
        ):
            raise ValidationError("Target calories must be a positive number")
        if not dietary_preferences:
            raise ValidationError("At least one dietary preference is required")

        foods, used_fallback = self.catalog_service.filter_by_tags(
            dietary_preferences
        )
        meals = {
            key: self._build_meal(
                foods, round_half_up(target_calories * share), meal_type
            )
            for key, meal_type, share in MEAL_SPLITS
        }
        _logger.info(
            "Suggested meal plan: target=%s preferences=%s candidates=%s fallback=%s",
            target_calories,
            dietary_preferences,
            len(foods),
            used_fallback,
        )
        return MealPlan(
            daily_target=target_calories,
            dietary_preferences=list(dietary_preferences),
            used_fallback=used_fallback,
            **meals,
        )

    def _build_meal(self, foods: list[FoodItem], target: int, meal_type: str) -> Meal:
        items: list[MealItem] = []
        used: set[int] = set()
        remaining: float = target

        def pick(
            predicate: Callable[[FoodItem], bool],
            servings_for: Callable[[FoodItem], float],
        ) -> None:
            nonlocal remaining
            candidates = [
                food
                for food in foods
                if food.calories > 0 and food.id not in used and predicate(food)
            ]
            if not candidates:
                return
            food = self.selector.choice(candidates)
            servings = servings_for(food)
            meal_calories = food.calories * servings
            items.append(
                MealItem(food=food, servings=servings, meal_calories=meal_calories)
            )
            remaining -= meal_calories
            used.add(food.id)

        pick(
            lambda food: food.protein_g > 10 and food.calories <= remaining * 0.4,
            lambda food: max(1, math.floor(target * 0.3 / food.calories)),
        )
        if remaining > 100:
            pick(
                lambda food: food.carbs_g > 10 and food.calories <= remaining * 0.4,
                lambda food: max(1, math.floor(target * 0.25 / food.calories)),
            )
        if remaining > 50:
            pick(
                lambda food: _is_vegetable_or_fruit(food)
                and food.calories <= remaining,
                lambda food: max(1, math.floor(remaining / food.calories)),
            )
        if remaining > 50:
            pick(
                lambda food: food.fat_g > 5 and food.calories <= remaining,
                lambda food: max(0.5, math.floor(remaining / food.calories)),
            )

        return Meal(
            meal_type=meal_type,
            items=items,
            total_calories=round_half_up(sum(item.meal_calories for item in items)),
            target_calories=target,
        )


def _is_vegetable_or_fruit(food: FoodItem) -> bool:
    name = food.name.lower()
    return food.calories < 100 or any(hint in name for hint in VEGETABLE_NAME_HINTS)
