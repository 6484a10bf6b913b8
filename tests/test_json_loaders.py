"""Tests for JSON-backed reference data."""

import json
from pathlib import Path

from fitness_point.adapters.json_fitness_content import load_fitness_content
from fitness_point.adapters.json_food_catalog import JsonFoodCatalog, parse_food_row


def test_packaged_catalog_loads_all_foods() -> None:
    catalog = JsonFoodCatalog.load()

    foods = catalog.list_foods()

    assert len(foods) == 37
    assert len({food.id for food in foods}) == 37
    olive_oil = next(food for food in foods if food.name == "Olive Oil")
    assert olive_oil.calories == 884
    assert olive_oil.fat_g == 100
    assert "keto" in olive_oil.dietary_tags


def test_catalog_loads_from_custom_path(tmp_path: Path) -> None:
    path = tmp_path / "foods.json"
    path.write_text(
        json.dumps(
            [
                {
                    "id": 9,
                    "name": "Seitan",
                    "calories": 370,
                    "protein": 75,
                    "carbs": 14,
                    "fat": 1.9,
                    "serving_size": "100g",
                    "dietary_tags": ["Vegan"],
                }
            ]
        ),
        encoding="utf-8",
    )

    foods = JsonFoodCatalog.load(path).list_foods()

    assert [food.name for food in foods] == ["Seitan"]
    assert foods[0].dietary_tags == ("vegan",)


def test_parse_food_row_splits_comma_separated_tags() -> None:
    food = parse_food_row(
        {
            "id": "3",
            "name": "Tofu",
            "calories": 76,
            "protein": 8,
            "carbs": 1.9,
            "fat": 4.8,
            "serving_size": "100g",
            "dietary_tags": "vegan, vegetarian,,halal",
        }
    )

    assert food.id == 3
    assert food.dietary_tags == ("vegan", "vegetarian", "halal")


def test_packaged_fitness_content_loads() -> None:
    content = load_fitness_content()

    assert set(content.tips) == {"lose", "gain", "maintain"}
    assert content.exercises["gain"][0].name == "Barbell Squats"
