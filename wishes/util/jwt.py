"""Signing and verifying the auth cookie JWT (PyJWT, HMAC).

Claims: ``sub`` is the user ID as a string, ``name`` the display name at
sign-in time, plus ``iat``/``exp``.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from wishes.config import AuthSettings


class TokenPayload(BaseModel):
    """Verified token claims."""

    user_id: str
    display_name: str
    exp: datetime


class JWTError(Exception):
    """Token is malformed, badly signed or expired."""


def create_token(user_id: str, display_name: str, settings: AuthSettings) -> str:
    """Sign a token for ``user_id`` valid for ``jwt_expiry_days``."""
    issued_at = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "name": display_name,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of ``token`` and return its claims.

    Raises:
        JWTError: If the token cannot be trusted
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    return TokenPayload(
        user_id=claims["sub"],
        display_name=claims.get("name", ""),
        exp=claims["exp"],
    )
