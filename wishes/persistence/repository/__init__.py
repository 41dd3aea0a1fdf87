"""PostgreSQL repository implementations."""

from wishes.persistence.repository.user import PostgresUserRepository
from wishes.persistence.repository.wish import PostgresWishRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresWishRepository",
]
