"""Unsupport wish use case."""

import logfire
from pydantic import BaseModel

from wishes.application.usecase.base import ResponseModel, to_session_id, to_user_id
from wishes.domain.service import SupportService
from wishes.domain.value import WishId, resolve_identity


class UnsupportWishRequest(BaseModel):
    """Unsupport wish request."""

    wish_id: str
    session_id: str | None = None
    user_id: int | None = None


class UnsupportWishResponse(ResponseModel):
    """Unsupport wish response."""

    message: str
    success: bool
    was_supported: bool


class UnsupportWishUseCase:
    """Use case for withdrawing a support."""

    def __init__(self, support_service: SupportService) -> None:
        """Initialize unsupport wish use case.

        Args:
            support_service: Support domain service
        """
        self.support_service = support_service

    async def execute(self, request: UnsupportWishRequest) -> UnsupportWishResponse:
        """Execute unsupport flow.

        Removing a support that does not exist is not an error; it answers
        ``success=False, was_supported=False`` and changes nothing.

        Args:
            request: Unsupport wish request

        Returns:
            Unsupport response
        """
        wish_id = WishId(request.wish_id)
        supporter = resolve_identity(
            user_id=to_user_id(request.user_id),
            session_id=to_session_id(request.session_id),
        )
        not_supported = UnsupportWishResponse(
            message="You have not supported this wish.",
            success=False,
            was_supported=False,
        )
        if supporter is None:
            return not_supported

        with logfire.span(
            "unsupport_wish", wish_id=str(wish_id), supporter=str(supporter)
        ):
            if not await self.support_service.has_supported(wish_id, supporter):
                return not_supported

            removed = await self.support_service.remove_support(wish_id, supporter)
            if not removed:
                return not_supported

            return UnsupportWishResponse(
                message="Support removed.",
                success=True,
                was_supported=True,
            )
