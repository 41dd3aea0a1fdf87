"""Update wish use case."""

import logfire
from pydantic import BaseModel

from wishes.application.usecase.base import (
    ResponseModel,
    WishView,
    to_session_id,
    to_user_id,
)
from wishes.domain.error import AuthorizationError, WishUpdateError
from wishes.domain.service import WishService


class UpdateWishRequest(BaseModel):
    """Update wish request."""

    name: str | None = None
    wish: str
    user_id: int | None = None
    session_id: str | None = None


class UpdateWishResponse(ResponseModel):
    """Update wish response."""

    message: str
    wish: WishView


class UpdateWishUseCase:
    """Use case for editing the caller's own wish."""

    def __init__(self, wish_service: WishService) -> None:
        """Initialize update wish use case.

        Args:
            wish_service: Wish domain service
        """
        self.wish_service = wish_service

    async def execute(self, request: UpdateWishRequest) -> UpdateWishResponse:
        """Execute update wish flow.

        Args:
            request: Update wish request

        Returns:
            Confirmation message and the updated wish

        Raises:
            AuthorizationError: If the caller has no identity
            WishUpdateError: If the caller has no wish
            ValidationError: If the new content or name is invalid
        """
        user_id = to_user_id(request.user_id)
        session_id = to_session_id(request.session_id)

        if user_id is None and session_id is None:
            raise AuthorizationError("You do not have permission to edit this wish.")

        with logfire.span("update_wish", has_user=user_id is not None):
            existing = await self.wish_service.get_wish_owned_by(
                user_id=user_id, session_id=session_id
            )
            if existing is None:
                raise WishUpdateError()

            updated = existing.update(request.name, request.wish)
            saved = await self.wish_service.save_wish(updated)

            return UpdateWishResponse(
                message="Wish updated successfully",
                wish=WishView.from_wish(saved),
            )
