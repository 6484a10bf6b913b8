"""Calorie and macro estimation using the Mifflin-St Jeor equation."""

import logging
import math
from dataclasses import dataclass

from fitness_point.domain.calories import EstimationResult, MacroBreakdown, MacroTarget
from fitness_point.domain.profiles import Profile
from fitness_point.errors import ComputationError, ValidationError

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = ACTIVITY_MULTIPLIERS["moderate"]

GOAL_ADJUSTMENTS = {
    "lose": -500,
    "maintain": 0,
    "gain": 500,
}

PROTEIN_GRAMS_PER_KG = 2.2
FAT_CALORIE_SHARE = 0.25
KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_FAT = 9

_logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up."""
    return math.floor(value + 0.5)


@dataclass
class CalorieService:
    """Estimates daily energy needs from body metrics."""

    def bmr(self, profile: Profile) -> float:
        """Return the basal metabolic rate in kcal/day."""
        _validate(profile)
        base = 10 * profile.weight_kg + 6.25 * profile.height_cm - 5 * profile.age
        if profile.sex.strip().lower() == "male":
            return base + 5
        return base - 161

    def tdee(self, profile: Profile) -> float:
        """Return total daily energy expenditure in kcal/day."""
        return self.bmr(profile) * activity_multiplier(profile.activity_level)

    def target_calories(self, profile: Profile) -> float:
        """Return the unrounded calorie target for the profile's goal."""
        return self.tdee(profile) + goal_adjustment(profile.goal)

    def estimate(self, profile: Profile) -> EstimationResult:
        """Compute BMR, TDEE, target calories and the macro split."""
        bmr = self.bmr(profile)
        tdee = bmr * activity_multiplier(profile.activity_level)
        target = tdee + goal_adjustment(profile.goal)
        if target <= 0:
            raise ComputationError(
                "Calculated calorie target is not positive; check the profile values"
            )

        protein_grams = round_half_up(profile.weight_kg * PROTEIN_GRAMS_PER_KG)
        protein_calories = protein_grams * KCAL_PER_GRAM_PROTEIN
        fat_grams = round_half_up(target * FAT_CALORIE_SHARE / KCAL_PER_GRAM_FAT)
        fat_calories = fat_grams * KCAL_PER_GRAM_FAT
        carb_calories = target - protein_calories - fat_calories
        carb_grams = round_half_up(carb_calories / KCAL_PER_GRAM_CARBS)

        result = EstimationResult(
            bmr=round_half_up(bmr),
            tdee=round_half_up(tdee),
            target_calories=round_half_up(target),
            goal=profile.goal,
            activity_level=profile.activity_level,
            macros=MacroBreakdown(
                protein=_macro(protein_grams, protein_calories, target),
                carbs=_macro(carb_grams, carb_calories, target),
                fat=_macro(fat_grams, fat_calories, target),
            ),
        )
        _logger.info(
            "Estimated calories: goal=%s activity=%s target=%s",
            result.goal,
            result.activity_level,
            result.target_calories,
        )
        return result


def activity_multiplier(activity_level: str | None) -> float:
    """Return the TDEE multiplier, defaulting to moderate activity."""
    if not activity_level:
        return DEFAULT_ACTIVITY_MULTIPLIER
    return ACTIVITY_MULTIPLIERS.get(
        activity_level.strip().lower(), DEFAULT_ACTIVITY_MULTIPLIER
    )


def goal_adjustment(goal: str | None) -> int:
    """Return the daily calorie adjustment for a goal."""
    if not goal:
        return 0
    return GOAL_ADJUSTMENTS.get(goal.strip().lower(), 0)


def _macro(grams: int, calories: float, target: float) -> MacroTarget:
    return MacroTarget(
        grams=grams,
        calories=calories,
        percentage=round_half_up(calories / target * 100),
    )


def _validate(profile: Profile) -> None:
    """Ensure the fields required by the BMR equation are present."""
    missing = [
        name
        for name, value in (
            ("age", profile.age),
            ("weight", profile.weight_kg),
            ("height", profile.height_cm),
        )
        if value is None or not math.isfinite(value) or value <= 0
    ]
    if not profile.sex or not profile.sex.strip():
        missing.append("gender")
    if missing:
        raise ValidationError(
            "Age, weight, height, and gender are required "
            f"(missing or invalid: {', '.join(missing)})"
        )
