"""Dict-backed user storage for tests."""

from itertools import count
from typing import Optional

from wishes.domain.model import User
from wishes.domain.repository.user import UserRepository
from wishes.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """Mirrors the users table: serial IDs, one row per Google account."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._ids = count(1)

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_google_id(self, google_id: str) -> Optional[User]:
        return next(
            (user for user in self._users.values() if user.google_id == google_id),
            None,
        )

    async def save(self, user: User) -> User:
        existing = await self.find_by_google_id(user.google_id)
        if existing is not None:
            user = user.model_copy(update={"id": existing.id})
        elif user.id is None:
            user = user.model_copy(update={"id": UserId(next(self._ids))})
        self._users[user.id] = user
        return user
