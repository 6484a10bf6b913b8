"""Calorie estimation and meal suggestion endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, Request

from fitness_point.api.dependencies import require_api_token
from fitness_point.api.schemas import ProfileFields, SuggestFoodsRequest

if TYPE_CHECKING:
    from fitness_point.containers import AppContainer
    from fitness_point.domain.calories import EstimationResult, MacroTarget
    from fitness_point.domain.foods import Meal, MealItem, MealPlan

router = APIRouter(
    prefix="/api/calories",
    tags=["calories"],
    dependencies=[Depends(require_api_token)],
)


@router.post("/calculate")
async def calculate(
    body: ProfileFields,
    request: Request,
    x_user_id: int | None = Header(default=None),
) -> dict[str, object]:
    """Estimate BMR, TDEE, calorie target and macros for a profile.

    Fields missing from the body are taken from the stored profile of the
    user named by ``X-User-Id``, when given.
    """
    container: AppContainer = request.app.state.container
    profile = container.profile_service.resolve(body.to_profile_fields(), x_user_id)
    result = container.calorie_service.estimate(profile)
    return _serialize_estimation(result)


@router.post("/suggest-foods")
async def suggest_foods(
    body: SuggestFoodsRequest, request: Request
) -> dict[str, object]:
    """Suggest breakfast, lunch, dinner and snacks for a calorie target."""
    container: AppContainer = request.app.state.container
    plan = container.meal_plan_service.suggest(
        body.target_calories, body.dietary_preferences
    )
    return _serialize_plan(plan)


def _serialize_estimation(result: EstimationResult) -> dict[str, object]:
    return {
        "bmr": result.bmr,
        "tdee": result.tdee,
        "targetCalories": result.target_calories,
        "goal": result.goal,
        "activityLevel": result.activity_level,
        "macros": {
            "protein": _serialize_macro(result.macros.protein),
            "carbs": _serialize_macro(result.macros.carbs),
            "fat": _serialize_macro(result.macros.fat),
        },
    }


def _serialize_macro(macro: MacroTarget) -> dict[str, object]:
    return {
        "grams": macro.grams,
        "calories": macro.calories,
        "percentage": macro.percentage,
    }


def _serialize_plan(plan: MealPlan) -> dict[str, object]:
    return {
        "dailyTarget": plan.daily_target,
        "suggestions": {
            "breakfast": _serialize_meal(plan.breakfast),
            "lunch": _serialize_meal(plan.lunch),
            "dinner": _serialize_meal(plan.dinner),
            "snacks": _serialize_meal(plan.snacks),
        },
        "dietaryPreferences": plan.dietary_preferences,
        "usedFallback": plan.used_fallback,
    }


def _serialize_meal(meal: Meal) -> dict[str, object]:
    return {
        "mealType": meal.meal_type,
        "foods": [_serialize_meal_item(item) for item in meal.items],
        "totalCalories": meal.total_calories,
        "targetCalories": meal.target_calories,
    }


def _serialize_meal_item(item: MealItem) -> dict[str, object]:
    food = item.food
    return {
        "id": food.id,
        "name": food.name,
        "calories": food.calories,
        "protein": food.protein_g,
        "carbs": food.carbs_g,
        "fat": food.fat_g,
        "serving_size": food.serving_size,
        "dietary_tags": list(food.dietary_tags),
        "servings": item.servings,
        "meal_calories": item.meal_calories,
    }
