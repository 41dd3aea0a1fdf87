"""Support wish use case."""

import logfire
from pydantic import BaseModel

from wishes.application.usecase.base import ResponseModel, to_session_id, to_user_id
from wishes.domain.error import AuthorizationError, NotFoundError, SelfSupportError
from wishes.domain.service import SupportService, WishService
from wishes.domain.value import WishId, resolve_identity


class SupportWishRequest(BaseModel):
    """Support wish request."""

    wish_id: str
    session_id: str | None = None
    user_id: int | None = None


class SupportWishResponse(ResponseModel):
    """Support wish response."""

    message: str
    success: bool
    already_supported: bool


class SupportWishUseCase:
    """Use case for supporting someone else's wish."""

    def __init__(
        self,
        wish_service: WishService,
        support_service: SupportService,
    ) -> None:
        """Initialize support wish use case.

        Args:
            wish_service: Wish domain service
            support_service: Support domain service
        """
        self.wish_service = wish_service
        self.support_service = support_service

    async def execute(self, request: SupportWishRequest) -> SupportWishResponse:
        """Execute support flow.

        Steps:
        1. Resolve the supporter (user preferred, else session)
        2. Answer early if the supporter already supports the wish
        3. Load the wish and reject self-support
        4. Record the support; storage decides the winner of a concurrent race

        Args:
            request: Support wish request

        Returns:
            Support response; ``already_supported`` is True for repeats

        Raises:
            AuthorizationError: If the caller has no identity
            NotFoundError: If the wish does not exist
            SelfSupportError: If the caller authored the wish
        """
        wish_id = WishId(request.wish_id)
        supporter = resolve_identity(
            user_id=to_user_id(request.user_id),
            session_id=to_session_id(request.session_id),
        )
        if supporter is None:
            raise AuthorizationError("An identity is required to support a wish.")

        with logfire.span(
            "support_wish", wish_id=str(wish_id), supporter=str(supporter)
        ):
            if await self.support_service.has_supported(wish_id, supporter):
                return SupportWishResponse(
                    message="You have already supported this wish.",
                    success=True,
                    already_supported=True,
                )

            wish = await self.wish_service.get_wish_by_id(wish_id)
            if wish is None:
                raise NotFoundError("Wish")

            validation = wish.can_support(supporter)
            if not validation.is_valid:
                logfire.warn("Self-support rejected", wish_id=str(wish_id))
                raise SelfSupportError()

            added = await self.support_service.add_support(wish_id, supporter)
            if not added:
                return SupportWishResponse(
                    message="You have already supported this wish.",
                    success=True,
                    already_supported=True,
                )

            return SupportWishResponse(
                message="Wish supported.",
                success=True,
                already_supported=False,
            )
