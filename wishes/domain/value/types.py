"""Domain value objects for wishes.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from typing import Any, ClassVar

from pydantic import field_validator

from wishes.domain.error import InvariantViolation, ValidationError
from wishes.domain.value.common import RootValueObject


class WishContent(RootValueObject[str]):
    """Text of a wish.

    Stored trimmed; must hold 1-240 characters after trimming.
    """

    MIN_LENGTH: ClassVar[int] = 1
    MAX_LENGTH: ClassVar[int] = 240

    @field_validator("root", mode="before")
    @classmethod
    def validate_content(cls, v: Any) -> str:
        """Trim and validate wish text length."""
        if not isinstance(v, str):
            raise ValidationError("Wish content must be text")
        trimmed = v.strip()
        if len(trimmed) < cls.MIN_LENGTH:
            raise ValidationError(
                f"Wish content must have at least {cls.MIN_LENGTH} character"
            )
        if len(trimmed) > cls.MAX_LENGTH:
            raise ValidationError(
                f"Wish content cannot be longer than {cls.MAX_LENGTH} characters"
            )
        return trimmed


class WishName(RootValueObject[str]):
    """Display name attached to a wish (at most 64 characters, trimmed)."""

    MAX_LENGTH: ClassVar[int] = 64

    @field_validator("root", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        """Trim and validate name length."""
        if not isinstance(v, str):
            raise ValidationError("Name must be text")
        trimmed = v.strip()
        if not trimmed:
            raise ValidationError("Name cannot be blank")
        if len(trimmed) > cls.MAX_LENGTH:
            raise ValidationError(
                f"Name cannot be longer than {cls.MAX_LENGTH} characters"
            )
        return trimmed


class SupportCount(RootValueObject[int]):
    """Number of identities supporting a wish (never negative)."""

    @field_validator("root", mode="before")
    @classmethod
    def validate_non_negative(cls, v: Any) -> int:
        """Validate count is a non-negative integer."""
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValidationError("SupportCount must be an integer")
        if v < 0:
            raise ValidationError("SupportCount cannot be negative")
        return v

    @classmethod
    def zero(cls) -> "SupportCount":
        """Return a count of zero."""
        return cls(0)

    def increment(self) -> "SupportCount":
        """Return a count one higher."""
        return SupportCount(self.root + 1)

    def decrement(self) -> "SupportCount":
        """Return a count one lower.

        Raises:
            InvariantViolation: If the count is already zero
        """
        if self.root == 0:
            raise InvariantViolation("Cannot decrement SupportCount below zero")
        return SupportCount(self.root - 1)
