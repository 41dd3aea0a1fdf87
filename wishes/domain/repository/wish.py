"""Wish repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from wishes.domain.model import Wish, WishWithSupportStatus
from wishes.domain.value import SessionId, UserId, WishId


class WishRepository(ABC):
    """Repository for the Wish aggregate and its supports.

    Defines the contract for wish persistence operations.
    Implementations live in the persistence layer. Any method may raise
    RepositoryError when the storage layer fails.

    Support operations identify the supporter by ``user_id`` when given,
    otherwise by ``session_id``.
    """

    @abstractmethod
    async def save(self, wish: Wish, owner_user_id: Optional[UserId] = None) -> Wish:
        """Save a wish (create or update).

        Args:
            wish: The wish to save
            owner_user_id: Registered user to associate the wish with;
                defaults to the author when the author is a user

        Returns:
            The saved wish
        """
        pass

    @abstractmethod
    async def find_by_id(self, wish_id: WishId) -> Optional[Wish]:
        """Find a wish by ID.

        Args:
            wish_id: The wish's unique identifier

        Returns:
            The wish (with supporters) if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: UserId) -> Optional[Wish]:
        """Find the wish owned by a registered user.

        Args:
            user_id: The user's ID

        Returns:
            The wish if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_session_id(self, session_id: SessionId) -> Optional[Wish]:
        """Find the wish posted from an anonymous session.

        Args:
            session_id: The session's ID

        Returns:
            The wish if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_latest(self, limit: int = 20, offset: int = 0) -> List[Wish]:
        """Find the newest wishes.

        Ordered by created_at descending, ties broken by ID descending.

        Args:
            limit: Maximum number of wishes to return
            offset: Number of wishes to skip

        Returns:
            List of wishes
        """
        pass

    @abstractmethod
    async def find_latest_with_support_status(
        self,
        limit: int = 20,
        offset: int = 0,
        viewer_session_id: Optional[SessionId] = None,
        viewer_user_id: Optional[UserId] = None,
    ) -> List[WishWithSupportStatus]:
        """Find the newest wishes together with the viewer's support status.

        Same ordering as find_latest.

        Args:
            limit: Maximum number of wishes to return
            offset: Number of wishes to skip
            viewer_session_id: Anonymous viewer session
            viewer_user_id: Signed-in viewer (takes priority over the session)

        Returns:
            List of wishes with ``is_supported`` set for the viewer
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all wishes.

        Returns:
            Total number of wishes
        """
        pass

    @abstractmethod
    async def add_support(
        self,
        wish_id: WishId,
        session_id: Optional[SessionId] = None,
        user_id: Optional[UserId] = None,
    ) -> bool:
        """Record a support for a wish.

        At most one support per identity per wish is kept; the uniqueness
        is enforced by storage so concurrent duplicates are safe.

        Args:
            wish_id: The supported wish
            session_id: Supporting session
            user_id: Supporting user

        Returns:
            True if a new support was recorded, False if it already existed
        """
        pass

    @abstractmethod
    async def remove_support(
        self,
        wish_id: WishId,
        session_id: Optional[SessionId] = None,
        user_id: Optional[UserId] = None,
    ) -> bool:
        """Remove a support (idempotent).

        Args:
            wish_id: The supported wish
            session_id: Supporting session
            user_id: Supporting user

        Returns:
            True if a support was removed, False if none existed
        """
        pass

    @abstractmethod
    async def has_supported(
        self,
        wish_id: WishId,
        session_id: Optional[SessionId] = None,
        user_id: Optional[UserId] = None,
    ) -> bool:
        """Check whether an identity supports a wish.

        Args:
            wish_id: The wish
            session_id: Session to check
            user_id: User to check

        Returns:
            True if the identity has supported the wish
        """
        pass
