"""Domain models for fitness guidance."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FitnessTip:
    """Short piece of advice for a goal."""

    title: str
    content: str
    category: str


@dataclass(frozen=True)
class Exercise:
    """Recommended exercise with a set and rep scheme."""

    name: str
    description: str
    sets: str
    reps: str
    category: str


@dataclass(frozen=True)
class FitnessContent:
    """Tips and exercises keyed by goal."""

    tips: dict[str, list[FitnessTip]]
    exercises: dict[str, list[Exercise]]
