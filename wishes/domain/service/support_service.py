"""Support domain service."""

import logfire

from wishes.domain.repository import WishRepository
from wishes.domain.value import Identity, SessionId, UserId, UserIdentity, WishId

from .base import Service


def _supporter_args(identity: Identity) -> dict[str, SessionId | UserId]:
    """Split an identity into the keyword arguments of the repository."""
    if isinstance(identity, UserIdentity):
        return {"user_id": identity.id}
    return {"session_id": identity.id}


class SupportService(Service):
    """Domain service for support (like) records."""

    def __init__(self, wish_repository: WishRepository) -> None:
        """Initialize support service.

        Args:
            wish_repository: Wish repository (owns the supports table)
        """
        self.wish_repository = wish_repository

    async def has_supported(self, wish_id: WishId, supporter: Identity) -> bool:
        """Check whether ``supporter`` supports the wish.

        Args:
            wish_id: Wish ID
            supporter: Supporting identity

        Returns:
            True if a support record exists
        """
        return await self.wish_repository.has_supported(
            wish_id, **_supporter_args(supporter)
        )

    async def add_support(self, wish_id: WishId, supporter: Identity) -> bool:
        """Record a support.

        Args:
            wish_id: Wish ID
            supporter: Supporting identity

        Returns:
            True if recorded, False if storage already held this support
        """
        with logfire.span(
            "support_service.add_support",
            wish_id=str(wish_id),
            supporter=str(supporter),
        ):
            added = await self.wish_repository.add_support(
                wish_id, **_supporter_args(supporter)
            )
            if added:
                logfire.info("Wish supported", wish_id=str(wish_id))
            else:
                logfire.warn(
                    "Duplicate support attempt",
                    wish_id=str(wish_id),
                    supporter=str(supporter),
                )
            return added

    async def remove_support(self, wish_id: WishId, supporter: Identity) -> bool:
        """Remove a support.

        Args:
            wish_id: Wish ID
            supporter: Supporting identity

        Returns:
            True if a support was removed, False if none existed
        """
        with logfire.span(
            "support_service.remove_support",
            wish_id=str(wish_id),
            supporter=str(supporter),
        ):
            removed = await self.wish_repository.remove_support(
                wish_id, **_supporter_args(supporter)
            )
            if removed:
                logfire.info("Support removed from wish", wish_id=str(wish_id))
            else:
                logfire.info("No support to remove", wish_id=str(wish_id))
            return removed
