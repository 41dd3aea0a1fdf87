"""In-memory repository implementations for testing."""

from .user import InMemoryUserRepository
from .wish import InMemoryWishRepository

__all__ = [
    "InMemoryUserRepository",
    "InMemoryWishRepository",
]
