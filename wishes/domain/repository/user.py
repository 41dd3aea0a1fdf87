"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from wishes.domain.model import User
from wishes.domain.value import UserId


class UserRepository(ABC):
    """Storage of Google-backed user accounts."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: Storage-assigned user ID

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_google_id(self, google_id: str) -> Optional[User]:
        """Find a user by their Google account ID.

        Args:
            google_id: Google's stable account identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        New users (``id`` is None) get an ID assigned by storage.

        Args:
            user: The user to save

        Returns:
            The saved user, with its ID
        """
        pass
