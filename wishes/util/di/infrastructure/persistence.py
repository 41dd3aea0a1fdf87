"""Storage providers.

``PersistenceProvider`` is the swappable component; the test suite adds an
in-memory subclass next to the PostgreSQL one below.
"""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from wishes.config import Settings
from wishes.domain.repository import UserRepository, WishRepository
from wishes.persistence.database import (
    create_engine,
    create_session_factory,
    get_session,
)
from wishes.persistence.repository import (
    PostgresUserRepository,
    PostgresWishRepository,
)
from wishes.util.di.base import ProviderBase
from wishes.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Where wishes, supports and users are stored."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL storage: one engine per process, one transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Request transaction; committed when the request succeeds."""
        async with get_session(session_factory) as session:
            yield session

    @provide(scope=Scope.REQUEST)
    def wish_repository(self, session: AsyncSession) -> WishRepository:
        return PostgresWishRepository(session)

    @provide(scope=Scope.REQUEST)
    def user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)
