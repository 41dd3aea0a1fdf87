"""PostgreSQL implementation of Wish repository."""

from collections import defaultdict
from typing import Any, Dict, List, Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wishes.domain.error import AlreadyPostedError, RepositoryError, ValidationError
from wishes.domain.model import Wish, WishWithSupportStatus
from wishes.domain.repository import WishRepository
from wishes.domain.value import SessionId, UserId, WishId, resolve_identity
from wishes.persistence.mappers import row_to_wish, wish_to_dict
from wishes.persistence.tables import supports_table, wishes_table


def _is_uuid(wish_id: WishId) -> bool:
    """Whether the ID can be compared against the UUID primary key."""
    try:
        UUID(wish_id.value)
    except ValueError:
        return False
    return True


def _supporter_clause(session_id: Optional[SessionId], user_id: Optional[UserId]):
    """WHERE clause matching one supporter, preferring the user."""
    if user_id is not None:
        return supports_table.c.user_id == user_id.value
    if session_id is not None:
        return supports_table.c.session_id == session_id.value
    raise ValidationError("A session or user ID is required")


class PostgresWishRepository(WishRepository):
    """PostgreSQL implementation of WishRepository.

    SQLAlchemy errors are wrapped in RepositoryError.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _load_supports(
        self, wish_ids: Sequence[str]
    ) -> Dict[str, List[Dict[str, Any]]]:
        """Batch-load supports for several wishes in one query."""
        by_wish: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
        if not wish_ids:
            return by_wish

        stmt = select(
            supports_table.c.wish_id,
            supports_table.c.session_id,
            supports_table.c.user_id,
        ).where(supports_table.c.wish_id.in_(wish_ids))
        result = await self.session.execute(stmt)
        for row in result.mappings().all():
            by_wish[str(row["wish_id"])].append(dict(row))
        return by_wish

    async def _fetch(self, stmt: Select) -> List[Wish]:
        """Run a wishes query and attach supporters to every row."""
        try:
            result = await self.session.execute(stmt)
            rows = [dict(row) for row in result.mappings().all()]
            supports = await self._load_supports([str(row["id"]) for row in rows])
        except SQLAlchemyError as e:
            logfire.error("Wish query failed", error=str(e))
            raise RepositoryError("Failed to load wishes") from e

        return [row_to_wish(row, supports.get(str(row["id"]), [])) for row in rows]

    async def _fetch_one(self, stmt: Select) -> Optional[Wish]:
        wishes = await self._fetch(stmt.limit(1))
        return wishes[0] if wishes else None

    async def save(self, wish: Wish, owner_user_id: Optional[UserId] = None) -> Wish:
        """Save a wish (create or update).

        The cached support_count is left alone on update; support operations
        maintain it.

        Raises:
            AlreadyPostedError: If the author already owns another wish
            RepositoryError: On any other storage failure
        """
        wish_dict = wish_to_dict(wish, owner_user_id)
        stmt = insert(wishes_table).values(**wish_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[wishes_table.c.id],
            set_={
                "name": stmt.excluded.name,
                "wish": stmt.excluded.wish,
                "user_id": stmt.excluded.user_id,
                "session_id": stmt.excluded.session_id,
            },
        )

        try:
            # Savepoint keeps the request transaction usable after a conflict
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            # Partial unique indexes on user_id/session_id back the
            # one-wish-per-identity rule.
            logfire.warn("Wish uniqueness violated", wish_id=str(wish.id))
            raise AlreadyPostedError() from e
        except SQLAlchemyError as e:
            logfire.error("Failed to save wish", wish_id=str(wish.id), error=str(e))
            raise RepositoryError("Failed to save wish") from e

        return wish

    async def find_by_id(self, wish_id: WishId) -> Optional[Wish]:
        """Find a wish by ID."""
        if not _is_uuid(wish_id):
            return None
        return await self._fetch_one(
            select(wishes_table).where(wishes_table.c.id == wish_id.value)
        )

    async def find_by_user_id(self, user_id: UserId) -> Optional[Wish]:
        """Find the wish owned by a registered user."""
        return await self._fetch_one(
            select(wishes_table).where(wishes_table.c.user_id == user_id.value)
        )

    async def find_by_session_id(self, session_id: SessionId) -> Optional[Wish]:
        """Find the wish posted from an anonymous session."""
        return await self._fetch_one(
            select(wishes_table).where(wishes_table.c.session_id == session_id.value)
        )

    def _latest(self, limit: int, offset: int) -> Select:
        return (
            select(wishes_table)
            .order_by(wishes_table.c.created_at.desc(), wishes_table.c.id.desc())
            .limit(limit)
            .offset(offset)
        )

    async def find_latest(self, limit: int = 20, offset: int = 0) -> List[Wish]:
        """Find the newest wishes; supporters are batch-loaded in one query."""
        return await self._fetch(self._latest(limit, offset))

    async def find_latest_with_support_status(
        self,
        limit: int = 20,
        offset: int = 0,
        viewer_session_id: Optional[SessionId] = None,
        viewer_user_id: Optional[UserId] = None,
    ) -> List[WishWithSupportStatus]:
        """Find the newest wishes with the viewer's support status.

        Support status is read from the supporters already batch-loaded for
        each wish.
        """
        wishes = await self._fetch(self._latest(limit, offset))
        viewer = resolve_identity(user_id=viewer_user_id, session_id=viewer_session_id)
        return [
            WishWithSupportStatus(
                wish=wish,
                is_supported=viewer is not None and wish.is_supported_by(viewer),
            )
            for wish in wishes
        ]

    async def count(self) -> int:
        """Count all wishes."""
        try:
            result = await self.session.execute(
                select(func.count()).select_from(wishes_table)
            )
        except SQLAlchemyError as e:
            raise RepositoryError("Failed to count wishes") from e
        return result.scalar_one()

    async def _refresh_support_count(self, wish_id: WishId) -> None:
        """Recompute the cached support_count from the supports table."""
        count_stmt = (
            select(func.count())
            .select_from(supports_table)
            .where(supports_table.c.wish_id == wish_id.value)
            .scalar_subquery()
        )
        stmt = (
            update(wishes_table)
            .where(wishes_table.c.id == wish_id.value)
            .values(support_count=count_stmt)
        )
        await self.session.execute(stmt)

    async def add_support(
        self,
        wish_id: WishId,
        session_id: Optional[SessionId] = None,
        user_id: Optional[UserId] = None,
    ) -> bool:
        """Record a support.

        ``ON CONFLICT DO NOTHING`` against the partial unique indexes makes
        concurrent duplicates collapse into one row.
        """
        if user_id is None and session_id is None:
            raise ValidationError("A session or user ID is required")

        stmt = (
            insert(supports_table)
            .values(
                wish_id=wish_id.value,
                user_id=user_id.value if user_id is not None else None,
                session_id=session_id.value if user_id is None else None,
            )
            .on_conflict_do_nothing()
            .returning(supports_table.c.id)
        )

        try:
            result = await self.session.execute(stmt)
            added = result.scalar_one_or_none() is not None
            if added:
                await self._refresh_support_count(wish_id)
            await self.session.flush()
        except SQLAlchemyError as e:
            logfire.error("Failed to add support", wish_id=str(wish_id), error=str(e))
            raise RepositoryError("Failed to add support") from e

        return added

    async def remove_support(
        self,
        wish_id: WishId,
        session_id: Optional[SessionId] = None,
        user_id: Optional[UserId] = None,
    ) -> bool:
        """Remove a support (idempotent)."""
        if not _is_uuid(wish_id):
            return False
        stmt = delete(supports_table).where(
            supports_table.c.wish_id == wish_id.value,
            _supporter_clause(session_id, user_id),
        )

        try:
            result = await self.session.execute(stmt)
            removed = result.rowcount > 0  # type: ignore[attr-defined]
            if removed:
                await self._refresh_support_count(wish_id)
            await self.session.flush()
        except SQLAlchemyError as e:
            logfire.error(
                "Failed to remove support", wish_id=str(wish_id), error=str(e)
            )
            raise RepositoryError("Failed to remove support") from e

        return removed

    async def has_supported(
        self,
        wish_id: WishId,
        session_id: Optional[SessionId] = None,
        user_id: Optional[UserId] = None,
    ) -> bool:
        """Check whether an identity supports a wish."""
        if (user_id is None and session_id is None) or not _is_uuid(wish_id):
            return False

        stmt = select(supports_table.c.id).where(
            supports_table.c.wish_id == wish_id.value,
            _supporter_clause(session_id, user_id),
        )
        try:
            result = await self.session.execute(stmt.limit(1))
        except SQLAlchemyError as e:
            raise RepositoryError("Failed to check support") from e
        return result.first() is not None
