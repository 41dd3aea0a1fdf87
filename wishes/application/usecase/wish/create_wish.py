"""Create wish use case."""

import logfire
from pydantic import BaseModel

from wishes.application.usecase.base import (
    ResponseModel,
    WishView,
    to_session_id,
    to_user_id,
)
from wishes.domain.error import AlreadyPostedError
from wishes.domain.model import Wish
from wishes.domain.service import WishService
from wishes.domain.value import SessionId, resolve_identity


class CreateWishRequest(BaseModel):
    """Create wish request."""

    name: str | None = None
    wish: str
    session_id: str | None = None  # Anonymous session from cookie
    user_id: int | None = None  # User ID from authenticated user


class CreateWishResponse(ResponseModel):
    """Create wish response."""

    wish: WishView
    session_id: str | None


class CreateWishUseCase:
    """Use case for posting the caller's one and only wish."""

    def __init__(self, wish_service: WishService) -> None:
        """Initialize create wish use case.

        Args:
            wish_service: Wish domain service
        """
        self.wish_service = wish_service

    async def execute(self, request: CreateWishRequest) -> CreateWishResponse:
        """Execute create wish flow.

        Steps:
        1. Resolve the author (user preferred, else session)
        2. Reject if that identity already owns a wish
        3. Mint a session for callers with no identity at all
        4. Create and save the wish

        Args:
            request: Create wish request

        Returns:
            The new wish and the session the caller should keep

        Raises:
            AlreadyPostedError: If the identity already has a wish
            ValidationError: If content or name is invalid
        """
        user_id = to_user_id(request.user_id)
        session_id = to_session_id(request.session_id)

        with logfire.span(
            "create_wish",
            has_user=user_id is not None,
            has_session=session_id is not None,
        ):
            author = resolve_identity(user_id=user_id, session_id=session_id)

            if author is not None:
                existing = await self.wish_service.get_wish_owned_by(
                    user_id=user_id,
                    session_id=session_id if user_id is None else None,
                )
                if existing is not None:
                    logfire.warn("Wish already posted", author=str(author))
                    raise AlreadyPostedError()
            else:
                session_id = SessionId.generate()
                author = resolve_identity(session_id=session_id)
                logfire.info("Minted anonymous session for new wish")

            wish = Wish.create(request.wish, request.name, author=author)
            saved = await self.wish_service.save_wish(wish, owner_user_id=user_id)

            return CreateWishResponse(
                wish=WishView.from_wish(saved),
                session_id=str(session_id) if session_id else None,
            )
