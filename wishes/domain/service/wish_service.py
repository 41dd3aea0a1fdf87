"""Wish domain service."""

from typing import Optional

import logfire

from wishes.domain.model import Wish, WishWithSupportStatus
from wishes.domain.repository import WishRepository
from wishes.domain.value import SessionId, UserId, WishId

from .base import Service


class WishService(Service):
    """Domain service for wish lookups and persistence."""

    def __init__(self, wish_repository: WishRepository) -> None:
        """Initialize wish service.

        Args:
            wish_repository: Wish repository
        """
        self.wish_repository = wish_repository

    async def save_wish(
        self, wish: Wish, owner_user_id: Optional[UserId] = None
    ) -> Wish:
        """Save a wish.

        Args:
            wish: Wish to save
            owner_user_id: Registered owner, if any

        Returns:
            Saved wish
        """
        with logfire.span("wish_service.save_wish", wish_id=str(wish.id)):
            saved = await self.wish_repository.save(wish, owner_user_id)
            logfire.info(
                "Wish saved", wish_id=str(saved.id), author=str(saved.author_id)
            )
            return saved

    async def get_wish_by_id(self, wish_id: WishId) -> Optional[Wish]:
        """Get a wish by ID.

        Args:
            wish_id: Wish ID

        Returns:
            Wish if found, None otherwise
        """
        with logfire.span("wish_service.get_wish_by_id", wish_id=str(wish_id)):
            wish = await self.wish_repository.find_by_id(wish_id)
            if wish is None:
                logfire.warn("Wish not found", wish_id=str(wish_id))
            return wish

    async def get_wish_by_session(self, session_id: SessionId) -> Optional[Wish]:
        """Get the wish posted from an anonymous session."""
        with logfire.span("wish_service.get_wish_by_session"):
            return await self.wish_repository.find_by_session_id(session_id)

    async def get_wish_owned_by(
        self,
        user_id: Optional[UserId] = None,
        session_id: Optional[SessionId] = None,
    ) -> Optional[Wish]:
        """Find the caller's own wish.

        Looks up by user first and falls back to the session when the user
        has no wish (or no user is signed in).

        Args:
            user_id: Signed-in user, if any
            session_id: Anonymous session, if any

        Returns:
            The caller's wish, or None
        """
        with logfire.span(
            "wish_service.get_wish_owned_by",
            has_user=user_id is not None,
            has_session=session_id is not None,
        ):
            if user_id is not None:
                wish = await self.wish_repository.find_by_user_id(user_id)
                if wish is not None:
                    return wish

            if session_id is not None:
                wish = await self.wish_repository.find_by_session_id(session_id)
                if wish is not None:
                    return wish

            return None

    async def list_latest(self, limit: int, offset: int) -> list[Wish]:
        """List the newest wishes."""
        with logfire.span("wish_service.list_latest", limit=limit, offset=offset):
            return await self.wish_repository.find_latest(limit=limit, offset=offset)

    async def list_latest_with_support_status(
        self,
        limit: int,
        offset: int,
        session_id: Optional[SessionId] = None,
        user_id: Optional[UserId] = None,
    ) -> list[WishWithSupportStatus]:
        """List the newest wishes with the viewer's support status."""
        with logfire.span(
            "wish_service.list_latest_with_support_status",
            limit=limit,
            offset=offset,
        ):
            return await self.wish_repository.find_latest_with_support_status(
                limit=limit,
                offset=offset,
                viewer_session_id=session_id,
                viewer_user_id=user_id,
            )

    async def count_wishes(self) -> int:
        """Count all wishes."""
        return await self.wish_repository.count()
