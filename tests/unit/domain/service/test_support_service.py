"""Unit tests for SupportService."""

import pytest

from wishes.domain.error import RepositoryError
from wishes.domain.repository import WishRepository
from wishes.domain.service import SupportService
from wishes.domain.value import WishId
from tests.factories import make_wish, session_identity, user_identity
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestAddSupport:
    """Tests for add_support method."""

    @pytest.mark.asyncio
    async def test_add_support_records_support_and_count(self, unit_env):
        """Supporting a wish records the supporter and bumps the count."""
        # Arrange
        support_service = await unit_env.get(SupportService)
        wish_repo = await unit_env.get(WishRepository)
        wish = await wish_repo.save(make_wish(author=session_identity("author")))
        supporter = session_identity("fan")

        # Act
        added = await support_service.add_support(wish.id, supporter)

        # Assert
        assert added is True
        assert await support_service.has_supported(wish.id, supporter)
        stored = await wish_repo.find_by_id(wish.id)
        assert stored.support_count.value == 1

    @pytest.mark.asyncio
    async def test_duplicate_support_reports_false(self, unit_env):
        """A second support from the same identity changes nothing."""
        # Arrange
        support_service = await unit_env.get(SupportService)
        wish_repo = await unit_env.get(WishRepository)
        wish = await wish_repo.save(make_wish(author=session_identity("author")))
        supporter = user_identity(5)
        await support_service.add_support(wish.id, supporter)

        # Act
        added = await support_service.add_support(wish.id, supporter)

        # Assert
        assert added is False
        stored = await wish_repo.find_by_id(wish.id)
        assert stored.support_count.value == 1

    @pytest.mark.asyncio
    async def test_support_for_missing_wish_is_storage_error(self, unit_env):
        support_service = await unit_env.get(SupportService)

        with pytest.raises(RepositoryError):
            await support_service.add_support(WishId("missing"), session_identity())


class TestRemoveSupport:
    """Tests for remove_support method."""

    @pytest.mark.asyncio
    async def test_remove_support(self, unit_env):
        # Arrange
        support_service = await unit_env.get(SupportService)
        wish_repo = await unit_env.get(WishRepository)
        wish = await wish_repo.save(make_wish(author=session_identity("author")))
        supporter = session_identity("fan")
        await support_service.add_support(wish.id, supporter)

        # Act
        removed = await support_service.remove_support(wish.id, supporter)

        # Assert
        assert removed is True
        assert not await support_service.has_supported(wish.id, supporter)
        stored = await wish_repo.find_by_id(wish.id)
        assert stored.support_count.value == 0

    @pytest.mark.asyncio
    async def test_remove_missing_support_reports_false(self, unit_env):
        """Removing a support that was never given is not an error."""
        # Arrange
        support_service = await unit_env.get(SupportService)
        wish_repo = await unit_env.get(WishRepository)
        wish = await wish_repo.save(make_wish(author=session_identity("author")))

        # Act
        removed = await support_service.remove_support(wish.id, session_identity("x"))

        # Assert
        assert removed is False
