"""Login and logout endpoints plus the session dependencies."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, Response

from photo_share.api.schemas import LoginRequest
from photo_share.api.serializers import serialize_profile

if TYPE_CHECKING:
    from photo_share.containers import AppContainer

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


def session_token(request: Request) -> str | None:
    """Return the session token cookie, if the client sent one."""
    container: AppContainer = request.app.state.container
    return request.cookies.get(container.settings.session_cookie_name)


async def require_session(
    request: Request, token: str | None = Depends(session_token)
) -> UUID:
    """Ensure the request carries a live session and return its user id."""
    container: AppContainer = request.app.state.container
    return container.session_gate.require_authenticated(token)


def set_session_cookie(container: AppContainer, response: Response, token: str) -> None:
    """Attach the session token cookie to a response."""
    response.set_cookie(
        key=container.settings.session_cookie_name,
        value=token,
        max_age=container.settings.session_ttl_seconds,
        httponly=True,
        samesite="lax",
    )


@router.post("/login")
async def login(
    request: Request,
    response: Response,
    payload: LoginRequest | None = None,
    token: str | None = Depends(session_token),
) -> dict[str, object]:
    """Check credentials, bind a new session and return the user."""
    container: AppContainer = request.app.state.container
    body = payload or LoginRequest()
    new_token, user = container.session_gate.login(body.login_name, body.password)
    container.session_gate.logout(token)
    set_session_cookie(container, response, new_token)
    return serialize_profile(user)


@router.post("/logout")
async def logout(
    request: Request, token: str | None = Depends(session_token)
) -> Response:
    """Destroy the session bound to the request, if any."""
    container: AppContainer = request.app.state.container
    container.session_gate.logout(token)
    response = Response()
    response.delete_cookie(container.settings.session_cookie_name)
    return response
