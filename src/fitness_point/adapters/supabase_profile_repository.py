"""Supabase-backed profile repository."""

from dataclasses import dataclass

from supabase import Client

from fitness_point.domain.profiles import StoredProfile
from fitness_point.services.profiles import ProfileRepository

_COLUMNS = {
    "age": "age",
    "sex": "gender",
    "height_cm": "height",
    "weight_kg": "weight",
    "activity_level": "activity_level",
    "goal": "goal",
}


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation reading profile columns on ``users``."""

    client: Client

    def get_profile(self, user_id: int) -> StoredProfile | None:
        """Return the stored profile for a user, if present."""
        response = (
            self.client.table("users")
            .select("id, " + ", ".join(_COLUMNS.values()))
            .eq("id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def update_profile(self, user_id: int, fields: dict[str, object]) -> StoredProfile:
        """Overwrite the profile columns of a user."""
        response = (
            self.client.table("users")
            .update({column: fields.get(name) for name, column in _COLUMNS.items()})
            .eq("id", user_id)
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update user profile in Supabase")
        return _parse_profile(response.data[0])


def _parse_profile(row: dict[str, object]) -> StoredProfile:
    age = row.get("age")
    height = row.get("height")
    weight = row.get("weight")
    return StoredProfile(
        user_id=int(row["id"]),
        age=int(age) if age is not None else None,
        sex=row.get("gender"),
        height_cm=float(height) if height is not None else None,
        weight_kg=float(weight) if weight is not None else None,
        activity_level=row.get("activity_level"),
        goal=row.get("goal"),
    )
