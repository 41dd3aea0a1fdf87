"""JWT domain service."""

import logfire

from wishes.config import AuthSettings
from wishes.domain.error import ValidationError
from wishes.domain.value import UserId
from wishes.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues and checks the tokens that identify signed-in users."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId, display_name: str) -> str:
        """Issue a token whose subject is ``user_id``."""
        token = create_token(str(user_id), display_name, self.auth_settings)
        logfire.info("Auth token issued", user_id=str(user_id))
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a token and return its claims.

        Raises:
            JWTError: If the token is invalid or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Auth token rejected", reason=str(e))
            raise

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Resolve the signed-in user from an optional cookie value.

        Every route accepts anonymous callers, so a token that is missing or
        fails verification simply means nobody is signed in.
        """
        if not token:
            return None

        try:
            return UserId.parse(self.verify_token(token).user_id)
        except (JWTError, ValidationError):
            return None
