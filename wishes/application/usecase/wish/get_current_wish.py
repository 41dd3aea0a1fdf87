"""Get current wish use case."""

from pydantic import BaseModel

from wishes.application.usecase.base import ResponseModel, WishView, to_session_id
from wishes.domain.service import WishService


class GetCurrentWishRequest(BaseModel):
    """Get current wish request."""

    session_id: str | None = None


class GetCurrentWishResponse(ResponseModel):
    """Get current wish response."""

    wish: WishView | None


class GetCurrentWishUseCase:
    """Use case for fetching the wish linked to an anonymous session."""

    def __init__(self, wish_service: WishService) -> None:
        self.wish_service = wish_service

    async def execute(self, request: GetCurrentWishRequest) -> GetCurrentWishResponse:
        session_id = to_session_id(request.session_id)
        if session_id is None:
            return GetCurrentWishResponse(wish=None)

        wish = await self.wish_service.get_wish_by_session(session_id)
        return GetCurrentWishResponse(wish=WishView.from_wish(wish) if wish else None)
