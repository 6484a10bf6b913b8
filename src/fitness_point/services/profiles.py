"""Stored body-metric profiles and request merging."""

import logging
from dataclasses import dataclass
from typing import Protocol

from fitness_point.domain.profiles import Profile, StoredProfile
from fitness_point.errors import NotFoundError

PROFILE_FIELDS = ("age", "sex", "height_cm", "weight_kg", "activity_level", "goal")

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for profile fields on user records."""

    def get_profile(self, user_id: int) -> StoredProfile | None:
        """Return the stored profile for a user, if the user exists."""

    def update_profile(self, user_id: int, fields: dict[str, object]) -> StoredProfile:
        """Overwrite the profile fields of a user and return the result."""


@dataclass
class ProfileService:
    """Application service for reading and updating profiles."""

    repository: ProfileRepository

    def get(self, user_id: int) -> StoredProfile:
        """Return a user's stored profile."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise NotFoundError("User not found")
        return profile

    def update(self, user_id: int, fields: dict[str, object]) -> StoredProfile:
        """Replace all profile fields; omitted fields are cleared."""
        self.get(user_id)
        payload = {name: fields.get(name) for name in PROFILE_FIELDS}
        updated = self.repository.update_profile(user_id, payload)
        _logger.info("Updated profile for user %s", user_id)
        return updated

    def resolve(self, fields: dict[str, object], user_id: int | None = None) -> Profile:
        """Build an estimation profile from request fields and stored values.

        Each request value wins when truthy; otherwise the stored value is
        used, then the activity and goal defaults.
        """
        stored = self.get(user_id) if user_id is not None else None

        def pick(name: str) -> object | None:
            value = fields.get(name)
            if value:
                return value
            return getattr(stored, name) if stored else None

        return Profile(
            age=pick("age"),
            weight_kg=pick("weight_kg"),
            height_cm=pick("height_cm"),
            sex=pick("sex"),
            activity_level=pick("activity_level") or "moderate",
            goal=pick("goal") or "maintain",
        )
