"""Get wish support status use case."""

from pydantic import BaseModel

from wishes.application.usecase.base import (
    ResponseModel,
    WishView,
    to_session_id,
    to_user_id,
)
from wishes.domain.service import SupportService, WishService
from wishes.domain.value import WishId, resolve_identity


class GetWishSupportStatusRequest(BaseModel):
    """Get wish support status request."""

    wish_id: str
    session_id: str | None = None
    user_id: int | None = None


class GetWishSupportStatusResponse(ResponseModel):
    """Get wish support status response."""

    is_supported: bool
    wish: WishView | None


class GetWishSupportStatusUseCase:
    """Use case for reading whether the caller supports a wish."""

    def __init__(
        self,
        wish_service: WishService,
        support_service: SupportService,
    ) -> None:
        """Initialize get wish support status use case.

        Args:
            wish_service: Wish domain service
            support_service: Support domain service
        """
        self.wish_service = wish_service
        self.support_service = support_service

    async def execute(
        self, request: GetWishSupportStatusRequest
    ) -> GetWishSupportStatusResponse:
        """Return the viewer's support flag alongside the current wish.

        The wish is loaded first so its support count is current.

        Args:
            request: Get wish support status request

        Returns:
            Support flag (False without an identity) and the wish, if it exists
        """
        wish_id = WishId(request.wish_id)
        wish = await self.wish_service.get_wish_by_id(wish_id)

        viewer = resolve_identity(
            user_id=to_user_id(request.user_id),
            session_id=to_session_id(request.session_id),
        )
        is_supported = False
        if viewer is not None:
            is_supported = await self.support_service.has_supported(wish_id, viewer)

        return GetWishSupportStatusResponse(
            is_supported=is_supported,
            wish=WishView.from_wish(wish, is_supported=is_supported) if wish else None,
        )
