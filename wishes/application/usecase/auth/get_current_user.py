"""Resolve the signed-in user behind an auth cookie."""

from datetime import datetime

from pydantic import BaseModel

from wishes.application.usecase.base import ResponseModel
from wishes.domain.error import NotFoundError
from wishes.domain.service import AuthService, JWTService


class GetCurrentUserRequest(BaseModel):
    token: str


class CurrentUser(ResponseModel):
    """Profile of the signed-in user as shown to themselves."""

    id: int
    display_name: str
    email: str | None
    picture: str | None
    created_at: datetime


class GetCurrentUserResponse(ResponseModel):
    user: CurrentUser


class GetCurrentUserUseCase:
    """Turn a token into the stored user it was issued for."""

    def __init__(self, jwt_service: JWTService, auth_service: AuthService) -> None:
        self.jwt_service = jwt_service
        self.auth_service = auth_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Load the token's subject.

        Raises:
            JWTError: If the token does not verify
            NotFoundError: If the subject no longer exists
        """
        claims = self.jwt_service.verify_token(request.token)
        user = await self.auth_service.deserialize_user(claims.user_id)
        if user is None:
            raise NotFoundError("User", claims.user_id)

        return GetCurrentUserResponse(
            user=CurrentUser(
                id=user.id.value,
                display_name=user.display_name,
                email=user.email,
                picture=user.picture,
                created_at=user.created_at,
            )
        )
