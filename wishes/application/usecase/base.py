"""Shared use case response models and identifier helpers."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from wishes.domain.model import Wish
from wishes.domain.value import SessionId, UserId


class ResponseModel(BaseModel):
    """Use case response serialised with camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WishView(ResponseModel):
    """Public representation of a wish.

    Author identifiers are never exposed.
    """

    id: str
    name: str | None
    display_name: str
    wish: str
    created_at: datetime
    support_count: int
    is_supported: bool | None = None

    @classmethod
    def from_wish(cls, wish: Wish, is_supported: bool | None = None) -> "WishView":
        return cls(
            id=str(wish.id),
            name=wish.name.value if wish.name else None,
            display_name=wish.display_name,
            wish=wish.content.value,
            created_at=wish.created_at,
            support_count=wish.support_count.value,
            is_supported=is_supported,
        )


def to_user_id(value: int | None) -> UserId | None:
    """Wrap an optional raw user ID."""
    return UserId(value) if value is not None else None


def to_session_id(value: str | None) -> SessionId | None:
    """Wrap an optional raw session ID; an empty cookie counts as absent."""
    return SessionId(value) if value else None
