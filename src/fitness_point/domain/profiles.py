"""Domain models for body-metric profiles."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Profile:
    """Body metrics used to estimate energy needs."""

    age: int | None
    weight_kg: float | None
    height_cm: float | None
    sex: str | None
    activity_level: str = "moderate"
    goal: str = "maintain"


@dataclass(frozen=True)
class StoredProfile:
    """Profile fields persisted on a user record."""

    user_id: int
    age: int | None
    sex: str | None
    height_cm: float | None
    weight_kg: float | None
    activity_level: str | None
    goal: str | None
