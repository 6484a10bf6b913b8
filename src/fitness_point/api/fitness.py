"""Fitness tips and exercise endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from fitness_point.api.dependencies import require_api_token

if TYPE_CHECKING:
    from fitness_point.containers import AppContainer

router = APIRouter(
    prefix="/api/fitness",
    tags=["fitness"],
    dependencies=[Depends(require_api_token)],
)


@router.get("/tips")
async def tips(request: Request, goal: str | None = None) -> dict[str, object]:
    """Return tips for a goal (lose, maintain or gain)."""
    container: AppContainer = request.app.state.container
    resolved, items = container.fitness_service.tips(goal)
    return {"tips": [asdict(tip) for tip in items], "goal": resolved}


@router.get("/exercises")
async def exercises(request: Request, goal: str | None = None) -> dict[str, object]:
    """Return suggested exercises for a goal."""
    container: AppContainer = request.app.state.container
    resolved, items = container.fitness_service.exercises(goal)
    return {"exercises": [asdict(exercise) for exercise in items], "goal": resolved}
