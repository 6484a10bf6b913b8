"""Domain models for calorie estimation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroTarget:
    """Daily target for a single macronutrient."""

    grams: int
    calories: float
    percentage: int


@dataclass(frozen=True)
class MacroBreakdown:
    """Protein, carb and fat targets for a calorie goal."""

    protein: MacroTarget
    carbs: MacroTarget
    fat: MacroTarget


@dataclass(frozen=True)
class EstimationResult:
    """Energy expenditure estimate with a macro split."""

    bmr: int
    tdee: int
    target_calories: int
    goal: str
    activity_level: str
    macros: MacroBreakdown
