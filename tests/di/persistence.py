"""In-memory storage for tests."""

from dishka import Scope, provide

from wishes.domain.repository import UserRepository, WishRepository
from wishes.persistence.repository.inmemory import (
    InMemoryUserRepository,
    InMemoryWishRepository,
)
from wishes.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Dict-backed repositories.

    APP scope keeps one store per container, so the requests of an e2e
    test see each other's writes while separate tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def wish_repository(self) -> WishRepository:
        return InMemoryWishRepository()

    @provide(scope=Scope.APP)
    def user_repository(self) -> UserRepository:
        return InMemoryUserRepository()
