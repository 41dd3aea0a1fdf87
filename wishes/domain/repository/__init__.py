"""Repository interfaces for wishes domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from wishes.domain.repository.user import UserRepository
from wishes.domain.repository.wish import WishRepository

__all__ = [
    "UserRepository",
    "WishRepository",
]
