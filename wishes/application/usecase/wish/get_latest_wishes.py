"""Get latest wishes use case."""

import logfire
from pydantic import BaseModel

from wishes.application.usecase.base import (
    ResponseModel,
    WishView,
    to_session_id,
    to_user_id,
)
from wishes.config import FeedSettings
from wishes.domain.service import WishService


class GetLatestWishesRequest(BaseModel):
    """Get latest wishes request.

    ``limit`` and ``offset`` are clamped rather than rejected.
    """

    limit: int | None = None
    offset: int = 0
    session_id: str | None = None  # Viewer, for support status
    user_id: int | None = None  # Viewer, for support status


class GetLatestWishesResponse(ResponseModel):
    """Get latest wishes response."""

    wishes: list[WishView]
    limit: int
    offset: int
    total: int


class GetLatestWishesUseCase:
    """Use case for reading the wish feed, newest first."""

    def __init__(self, wish_service: WishService, feed_settings: FeedSettings) -> None:
        """Initialize get latest wishes use case.

        Args:
            wish_service: Wish domain service
            feed_settings: Feed pagination settings
        """
        self.wish_service = wish_service
        self.feed_settings = feed_settings

    def _clamp(self, request: GetLatestWishesRequest) -> tuple[int, int]:
        """Clamp pagination to [1, max_limit] and a non-negative offset."""
        limit = request.limit
        if limit is None:
            limit = self.feed_settings.default_limit
        limit = max(1, min(limit, self.feed_settings.max_limit))
        offset = max(0, request.offset)
        return limit, offset

    async def execute(self, request: GetLatestWishesRequest) -> GetLatestWishesResponse:
        """Read one page of the feed without viewer-specific data.

        Args:
            request: Get latest wishes request (viewer fields ignored)

        Returns:
            The page with pagination metadata
        """
        limit, offset = self._clamp(request)

        with logfire.span("get_latest_wishes", limit=limit, offset=offset):
            wishes = await self.wish_service.list_latest(limit, offset)
            total = await self.wish_service.count_wishes()

            return GetLatestWishesResponse(
                wishes=[WishView.from_wish(wish) for wish in wishes],
                limit=limit,
                offset=offset,
                total=total,
            )

    async def execute_with_support_status(
        self, request: GetLatestWishesRequest
    ) -> GetLatestWishesResponse:
        """Read one page of the feed, marking wishes the viewer supports.

        Args:
            request: Get latest wishes request

        Returns:
            The page with ``is_supported`` set on every wish
        """
        limit, offset = self._clamp(request)

        with logfire.span(
            "get_latest_wishes_with_support_status", limit=limit, offset=offset
        ):
            items = await self.wish_service.list_latest_with_support_status(
                limit,
                offset,
                session_id=to_session_id(request.session_id),
                user_id=to_user_id(request.user_id),
            )
            total = await self.wish_service.count_wishes()

            return GetLatestWishesResponse(
                wishes=[
                    WishView.from_wish(item.wish, is_supported=item.is_supported)
                    for item in items
                ],
                limit=limit,
                offset=offset,
                total=total,
            )
