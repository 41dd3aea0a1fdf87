"""Caller identity resolution from cookies.

A caller is a signed-in user (``auth_token`` JWT cookie), an anonymous
session (``session_id`` cookie), both, or neither.
"""

from dataclasses import dataclass

import logfire
from fastapi import Request, Response

from wishes.config import Settings
from wishes.domain.service import JWTService
from wishes.domain.value import SessionId


@dataclass(frozen=True)
class Caller:
    """Identity fields of the current request, as raw use case inputs."""

    user_id: int | None = None
    session_id: str | None = None

    @property
    def is_anonymous(self) -> bool:
        return self.user_id is None and self.session_id is None


def resolve_caller(
    request: Request, jwt_service: JWTService, settings: Settings
) -> Caller:
    """Read the caller's identity from the request cookies.

    An invalid or expired token is treated as "not signed in".
    """
    token = request.cookies.get(settings.auth.auth_cookie_name)
    user_id = jwt_service.get_user_id_from_token(token)
    session_id = request.cookies.get(settings.auth.session_cookie_name) or None
    return Caller(
        user_id=user_id.value if user_id is not None else None,
        session_id=session_id,
    )


def set_session_cookie(response: Response, session_id: str, settings: Settings) -> None:
    """Hand an anonymous session to the browser."""
    response.set_cookie(
        key=settings.auth.session_cookie_name,
        value=session_id,
        httponly=True,
        secure=settings.secure_cookies,
        samesite="lax",
        path="/",
        max_age=settings.auth.session_cookie_max_age_days * 24 * 60 * 60,
    )


def ensure_session(caller: Caller) -> Caller:
    """Mint a session for a caller with no identity at all.

    The cookie is not set here; the route hands it out once the request
    succeeds.
    """
    if not caller.is_anonymous:
        return caller

    logfire.info("Minted anonymous session")
    return Caller(session_id=str(SessionId.generate()))
