"""Domain value objects for wishes."""

from wishes.domain.value.identifiers import SessionId, UserId, WishId
from wishes.domain.value.identity import (
    Identity,
    SessionIdentity,
    UserIdentity,
    resolve_identity,
)
from wishes.domain.value.types import SupportCount, WishContent, WishName

__all__ = [
    # Identifiers
    "WishId",
    "SessionId",
    "UserId",
    # Identity
    "Identity",
    "UserIdentity",
    "SessionIdentity",
    "resolve_identity",
    # Types
    "WishContent",
    "WishName",
    "SupportCount",
]
