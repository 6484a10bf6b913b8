"""Profile endpoints for user body metrics."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from fitness_point.api.dependencies import require_api_token
from fitness_point.api.schemas import ProfileFields

if TYPE_CHECKING:
    from fitness_point.containers import AppContainer
    from fitness_point.domain.profiles import StoredProfile

router = APIRouter(
    prefix="/api/users",
    tags=["users"],
    dependencies=[Depends(require_api_token)],
)


@router.get("/{user_id}/profile")
async def get_profile(user_id: int, request: Request) -> dict[str, object]:
    """Return the stored body metrics of a user."""
    container: AppContainer = request.app.state.container
    return _serialize_profile(container.profile_service.get(user_id))


@router.put("/{user_id}/profile")
async def update_profile(
    user_id: int, body: ProfileFields, request: Request
) -> dict[str, object]:
    """Replace the stored body metrics of a user."""
    container: AppContainer = request.app.state.container
    updated = container.profile_service.update(user_id, body.to_profile_fields())
    return _serialize_profile(updated)


def _serialize_profile(profile: StoredProfile) -> dict[str, object]:
    return {
        "id": profile.user_id,
        "age": profile.age,
        "gender": profile.sex,
        "height": profile.height_cm,
        "weight": profile.weight_kg,
        "activity_level": profile.activity_level,
        "goal": profile.goal,
    }
