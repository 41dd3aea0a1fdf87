"""Get user wish use case."""

from pydantic import BaseModel

from wishes.application.usecase.base import (
    ResponseModel,
    WishView,
    to_session_id,
    to_user_id,
)
from wishes.domain.service import WishService


class GetUserWishRequest(BaseModel):
    """Get user wish request."""

    user_id: int | None = None
    session_id: str | None = None


class GetUserWishResponse(ResponseModel):
    """Get user wish response."""

    wish: WishView | None


class GetUserWishUseCase:
    """Use case for fetching the caller's own wish."""

    def __init__(self, wish_service: WishService) -> None:
        """Initialize get user wish use case.

        Args:
            wish_service: Wish domain service
        """
        self.wish_service = wish_service

    async def execute(self, request: GetUserWishRequest) -> GetUserWishResponse:
        """Look up the caller's wish by user first, then by session.

        Args:
            request: Get user wish request

        Returns:
            The wish, or ``wish=None`` when the caller has not posted
        """
        wish = await self.wish_service.get_wish_owned_by(
            user_id=to_user_id(request.user_id),
            session_id=to_session_id(request.session_id),
        )
        return GetUserWishResponse(wish=WishView.from_wish(wish) if wish else None)
