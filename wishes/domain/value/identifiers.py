"""Strongly typed identifiers for wishes domain entities.

Wish and session identifiers are opaque strings (UUID4 when generated here);
user identifiers are positive integers assigned by storage.
"""

from typing import Any
from uuid import uuid4

from pydantic import field_validator

from wishes.domain.error import ValidationError
from wishes.domain.value.common import RootValueObject


class _StringId(RootValueObject[str]):
    """Non-empty string identifier."""

    @field_validator("root", mode="before")
    @classmethod
    def validate_not_blank(cls, v: Any) -> str:
        """Reject non-strings and empty/whitespace-only strings."""
        if not isinstance(v, str) or not v.strip():
            raise ValidationError(f"{cls.__name__} cannot be empty")
        return v


class WishId(_StringId):
    """Identifier of a wish."""

    @classmethod
    def generate(cls) -> "WishId":
        """Generate a fresh random wish identifier."""
        return cls(str(uuid4()))


class SessionId(_StringId):
    """Identifier of an anonymous browser session."""

    @classmethod
    def generate(cls) -> "SessionId":
        """Generate a fresh random session identifier."""
        return cls(str(uuid4()))


class UserId(RootValueObject[int]):
    """Identifier of a registered (Google-authenticated) user."""

    @field_validator("root", mode="before")
    @classmethod
    def validate_positive_integer(cls, v: Any) -> int:
        """Reject booleans, non-integers and non-positive numbers."""
        if isinstance(v, bool) or not isinstance(v, int) or v <= 0:
            raise ValidationError("UserId must be a positive integer")
        return v

    @classmethod
    def parse(cls, value: str) -> "UserId":
        """Parse a user ID from its string form (cookies, token claims)."""
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid user ID: {value!r}")
        return cls(number)
