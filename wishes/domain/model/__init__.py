"""Domain model entities for wishes."""

from wishes.domain.model.user import GoogleProfile, User
from wishes.domain.model.wish import (
    ANONYMOUS_NAME,
    SupportValidation,
    Wish,
    WishWithSupportStatus,
)

__all__ = [
    "ANONYMOUS_NAME",
    "GoogleProfile",
    "SupportValidation",
    "User",
    "Wish",
    "WishWithSupportStatus",
]
