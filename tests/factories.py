"""Builders for domain objects used across tests."""

from datetime import datetime

from wishes.domain.model import Wish
from wishes.domain.value import SessionId, SessionIdentity, UserId, UserIdentity


def session_identity(value: str = "session-author") -> SessionIdentity:
    """Anonymous identity."""
    return SessionIdentity(id=SessionId(value))


def user_identity(value: int = 1) -> UserIdentity:
    """Signed-in identity."""
    return UserIdentity(id=UserId(value))


def make_wish(
    content: str = "World peace",
    name: str | None = "Alice",
    author=None,
    created_at: datetime | None = None,
) -> Wish:
    """Build a fresh wish, optionally backdated for ordering tests."""
    wish = Wish.create(content, name, author=author or session_identity())
    if created_at is not None:
        wish = wish.model_copy(update={"created_at": created_at})
    return wish
