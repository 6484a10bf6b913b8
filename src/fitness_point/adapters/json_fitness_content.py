"""Fitness guidance content loaded from a JSON file."""

import json
from pathlib import Path

from fitness_point.domain.fitness import Exercise, FitnessContent, FitnessTip

DEFAULT_FITNESS_CONTENT_PATH = (
    Path(__file__).resolve().parents[1] / "data" / "fitness_content.json"
)


def load_fitness_content(path: Path | None = None) -> FitnessContent:
    """Load tips and exercises keyed by goal."""
    payload = json.loads(
        (path or DEFAULT_FITNESS_CONTENT_PATH).read_text(encoding="utf-8")
    )
    return FitnessContent(
        tips={
            goal.lower(): [FitnessTip(**tip) for tip in tips]
            for goal, tips in payload.get("tips", {}).items()
        },
        exercises={
            goal.lower(): [Exercise(**exercise) for exercise in exercises]
            for goal, exercises in payload.get("exercises", {}).items()
        },
    )
