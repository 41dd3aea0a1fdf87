"""In-memory wish repository for testing."""

from typing import Optional

from wishes.domain.error import AlreadyPostedError, RepositoryError, ValidationError
from wishes.domain.model import Wish, WishWithSupportStatus
from wishes.domain.repository.wish import WishRepository
from wishes.domain.value import (
    Identity,
    SessionId,
    SessionIdentity,
    UserId,
    UserIdentity,
    WishId,
    resolve_identity,
)


class InMemoryWishRepository(WishRepository):
    """In-memory implementation of WishRepository for testing.

    Applies the same uniqueness rules as the database schema: one wish per
    user, one wish per session, one support per identity per wish.
    """

    def __init__(self) -> None:
        self._wishes: dict[WishId, Wish] = {}
        self._owners: dict[WishId, UserId] = {}

    def _supporter(
        self, session_id: Optional[SessionId], user_id: Optional[UserId]
    ) -> Identity:
        supporter = resolve_identity(user_id=user_id, session_id=session_id)
        if supporter is None:
            raise ValidationError("A session or user ID is required")
        return supporter

    async def save(self, wish: Wish, owner_user_id: Optional[UserId] = None) -> Wish:
        """Save a wish.

        Raises:
            AlreadyPostedError: If another wish has the same user or session
        """
        if owner_user_id is None and isinstance(wish.author_id, UserIdentity):
            owner_user_id = wish.author_id.id

        for other in self._wishes.values():
            if other.id == wish.id:
                continue
            owner = self._owners.get(other.id)
            if owner_user_id is not None and owner == owner_user_id:
                raise AlreadyPostedError()
            if isinstance(wish.author_id, SessionIdentity) and (
                other.author_id == wish.author_id
            ):
                raise AlreadyPostedError()

        # Supports are owned by the repository; keep the stored ones
        existing = self._wishes.get(wish.id)
        if existing is not None:
            wish = wish.model_copy(
                update={
                    "supporters": existing.supporters,
                    "support_count": existing.support_count,
                }
            )

        self._wishes[wish.id] = wish
        if owner_user_id is not None:
            self._owners[wish.id] = owner_user_id
        return wish

    async def find_by_id(self, wish_id: WishId) -> Optional[Wish]:
        """Find a wish by ID."""
        return self._wishes.get(wish_id)

    async def find_by_user_id(self, user_id: UserId) -> Optional[Wish]:
        """Find the wish owned by a registered user."""
        for wish_id, owner in self._owners.items():
            if owner == user_id:
                return self._wishes[wish_id]
        return None

    async def find_by_session_id(self, session_id: SessionId) -> Optional[Wish]:
        """Find the wish posted from an anonymous session."""
        author = SessionIdentity(id=session_id)
        for wish in self._wishes.values():
            if wish.author_id == author:
                return wish
        return None

    async def find_latest(self, limit: int = 20, offset: int = 0) -> list[Wish]:
        """Find the newest wishes, ties broken by ID descending."""
        ordered = sorted(
            self._wishes.values(),
            key=lambda w: (w.created_at, w.id.value),
            reverse=True,
        )
        return ordered[offset : offset + limit]

    async def find_latest_with_support_status(
        self,
        limit: int = 20,
        offset: int = 0,
        viewer_session_id: Optional[SessionId] = None,
        viewer_user_id: Optional[UserId] = None,
    ) -> list[WishWithSupportStatus]:
        """Find the newest wishes with the viewer's support status."""
        viewer = resolve_identity(user_id=viewer_user_id, session_id=viewer_session_id)
        return [
            WishWithSupportStatus(
                wish=wish,
                is_supported=viewer is not None and wish.is_supported_by(viewer),
            )
            for wish in await self.find_latest(limit, offset)
        ]

    async def count(self) -> int:
        """Count all wishes."""
        return len(self._wishes)

    async def add_support(
        self,
        wish_id: WishId,
        session_id: Optional[SessionId] = None,
        user_id: Optional[UserId] = None,
    ) -> bool:
        """Record a support.

        Raises:
            RepositoryError: If the wish does not exist (foreign key)
        """
        supporter = self._supporter(session_id, user_id)
        wish = self._wishes.get(wish_id)
        if wish is None:
            raise RepositoryError(f"Wish {wish_id} does not exist")
        if wish.is_supported_by(supporter):
            return False

        self._wishes[wish_id] = wish.add_supporter(supporter)
        return True

    async def remove_support(
        self,
        wish_id: WishId,
        session_id: Optional[SessionId] = None,
        user_id: Optional[UserId] = None,
    ) -> bool:
        """Remove a support (idempotent)."""
        supporter = self._supporter(session_id, user_id)
        wish = self._wishes.get(wish_id)
        if wish is None or not wish.is_supported_by(supporter):
            return False

        self._wishes[wish_id] = wish.remove_supporter(supporter)
        return True

    async def has_supported(
        self,
        wish_id: WishId,
        session_id: Optional[SessionId] = None,
        user_id: Optional[UserId] = None,
    ) -> bool:
        """Check whether an identity supports a wish."""
        supporter = resolve_identity(user_id=user_id, session_id=session_id)
        wish = self._wishes.get(wish_id)
        if supporter is None or wish is None:
            return False
        return wish.is_supported_by(supporter)
