"""Authentication routes.

Signing in happens through Google OAuth outside this service; these routes
report and end the resulting session.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request, Response
from pydantic import BaseModel

from wishes.application.usecase.auth import (
    CurrentUser,
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from wishes.config import Settings
from wishes.domain.error import NotFoundError
from wishes.util.jwt import JWTError
from wishes.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


class AuthStatusResponse(BaseModel):
    """Response for checking authentication status.

    Used by /auth/me to return current user if authenticated,
    or indicate unauthenticated state without raising an error.
    """

    authenticated: bool
    user: CurrentUser | None = None


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    settings: FromDishka[Settings],
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    Safe to call without authentication: returns ``authenticated=false``
    instead of an error.
    """
    token = request.cookies.get(settings.auth.auth_cookie_name)
    if not token:
        return AuthStatusResponse(authenticated=False)

    try:
        result = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except (JWTError, NotFoundError) as e:
        logfire.info("Auth token rejected", error=str(e))
        return AuthStatusResponse(authenticated=False)

    return AuthStatusResponse(authenticated=True, user=result.user)


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    logger.info("Clearing auth cookie")
    response.delete_cookie(key=settings.auth.auth_cookie_name, path="/")
    return LogoutResponse(success=True, message="Successfully logged out")
