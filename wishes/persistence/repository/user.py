"""PostgreSQL user storage."""

from typing import Optional

import logfire
from sqlalchemy import Select, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wishes.domain.error import RepositoryError
from wishes.domain.model import User
from wishes.domain.repository import UserRepository
from wishes.domain.value import UserId
from wishes.persistence.mappers import row_to_user, user_to_dict
from wishes.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """Users keyed by an integer ID, unique per Google account."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _first(self, stmt: Select) -> Optional[User]:
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise RepositoryError("Failed to load user") from e
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._first(
            select(users_table).where(users_table.c.id == user_id.value)
        )

    async def find_by_google_id(self, google_id: str) -> Optional[User]:
        return await self._first(
            select(users_table).where(users_table.c.google_id == google_id)
        )

    async def save(self, user: User) -> User:
        """Upsert on ``google_id`` and return the user with its stored ID.

        Two first sign-ins racing for the same Google account end up with
        the same row.
        """
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.google_id],
            set_={
                "display_name": stmt.excluded.display_name,
                "email": stmt.excluded.email,
                "picture": stmt.excluded.picture,
            },
        ).returning(users_table.c.id)

        try:
            result = await self.session.execute(stmt)
            user_id = UserId(result.scalar_one())
        except SQLAlchemyError as e:
            logfire.error("Failed to save user", error=str(e))
            raise RepositoryError("Failed to save user") from e

        return user.model_copy(update={"id": user_id})
