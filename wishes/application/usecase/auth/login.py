"""Login use case."""

import logfire
from pydantic import BaseModel

from wishes.application.usecase.base import ResponseModel
from wishes.domain.model import GoogleProfile
from wishes.domain.service import AuthService, JWTService


class LoginRequest(BaseModel):
    """Login request.

    The Google OAuth code exchange happens before this use case runs; the
    request carries the verified profile it produced.
    """

    google_id: str
    display_name: str
    email: str | None = None
    picture: str | None = None


class LoginResponse(ResponseModel):
    """Login response."""

    token: str
    user_id: int
    display_name: str


class LoginUseCase:
    """Use case for signing in with a Google profile."""

    def __init__(
        self,
        auth_service: AuthService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Find or create the user for the Google profile
        2. Issue a JWT whose subject is the user ID

        Args:
            request: Login request with the verified profile

        Returns:
            Login response with JWT token and user info
        """
        profile = GoogleProfile(
            id=request.google_id,
            display_name=request.display_name,
            email=request.email,
            picture=request.picture,
        )

        with logfire.span("login_user", google_id=profile.id):
            user = await self.auth_service.authenticate_with_google(profile)
            token = self.jwt_service.create_token(user.id, user.display_name)

            return LoginResponse(
                token=token,
                user_id=user.id.value,
                display_name=user.display_name,
            )
