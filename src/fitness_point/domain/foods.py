"""Domain models for the food catalog and meal plans."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodItem:
    """Catalog food with macros per serving."""

    id: int
    name: str
    calories: int
    protein_g: float
    carbs_g: float
    fat_g: float
    serving_size: str
    dietary_tags: tuple[str, ...]


@dataclass(frozen=True)
class MealItem:
    """Food picked for a meal with its serving count."""

    food: FoodItem
    servings: float
    meal_calories: float


@dataclass(frozen=True)
class Meal:
    """Suggested meal built against a calorie sub-budget."""

    meal_type: str
    items: list[MealItem]
    total_calories: int
    target_calories: int


@dataclass(frozen=True)
class MealPlan:
    """Four-meal suggestion for a daily calorie target."""

    daily_target: float
    breakfast: Meal
    lunch: Meal
    dinner: Meal
    snacks: Meal
    dietary_preferences: list[str]
    used_fallback: bool

    def meals(self) -> list[Meal]:
        """Return the meals in serving order."""
        return [self.breakfast, self.lunch, self.dinner, self.snacks]
