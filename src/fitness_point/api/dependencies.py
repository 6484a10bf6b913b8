"""Shared request dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Header, HTTPException, Request, status

from fitness_point.config import parse_api_token

if TYPE_CHECKING:
    from fitness_point.containers import AppContainer


def _get_api_token(request: Request) -> str | None:
    container: AppContainer = request.app.state.container
    return parse_api_token(container.settings.api_token)


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str | None = Depends(_get_api_token),
) -> None:
    """Ensure requests carry the shared API token when one is configured."""
    if api_token is None:
        return
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
