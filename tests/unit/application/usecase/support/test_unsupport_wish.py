"""Unit tests for UnsupportWishUseCase."""

import pytest

from wishes.application.usecase.support import (
    UnsupportWishRequest,
    UnsupportWishUseCase,
)
from wishes.domain.repository import WishRepository
from wishes.domain.value import SessionId
from tests.factories import make_wish, session_identity
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestUnsupportWish:
    """Tests for the unsupport flow."""

    @pytest.mark.asyncio
    async def test_unsupport_removes_support(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UnsupportWishUseCase)
        wish_repo = await unit_env.get(WishRepository)
        wish = await wish_repo.save(make_wish(author=session_identity("author")))
        await wish_repo.add_support(wish.id, session_id=SessionId("fan"))

        # Act
        result = await use_case.execute(
            UnsupportWishRequest(wish_id=str(wish.id), session_id="fan")
        )

        # Assert
        assert result.success is True
        assert result.was_supported is True
        stored = await wish_repo.find_by_id(wish.id)
        assert stored.support_count.value == 0

    @pytest.mark.asyncio
    async def test_unsupport_without_support_is_a_no_op(self, unit_env):
        """Withdrawing a support never given answers success=False."""
        # Arrange
        use_case = await unit_env.get(UnsupportWishUseCase)
        wish_repo = await unit_env.get(WishRepository)
        wish = await wish_repo.save(make_wish(author=session_identity("author")))

        # Act
        result = await use_case.execute(
            UnsupportWishRequest(wish_id=str(wish.id), session_id="stranger")
        )

        # Assert
        assert result.success is False
        assert result.was_supported is False

    @pytest.mark.asyncio
    async def test_unsupport_without_identity(self, unit_env):
        use_case = await unit_env.get(UnsupportWishUseCase)

        result = await use_case.execute(UnsupportWishRequest(wish_id="anything"))

        assert result.success is False
        assert result.was_supported is False

    @pytest.mark.asyncio
    async def test_support_removed_after_the_check_is_reported_as_missing(
        self, unit_env, monkeypatch
    ):
        """A concurrent withdrawal between the check and the delete wins."""
        # Arrange
        use_case = await unit_env.get(UnsupportWishUseCase)
        wish_repo = await unit_env.get(WishRepository)
        wish = await wish_repo.save(make_wish(author=session_identity("author")))
        await wish_repo.add_support(wish.id, session_id=SessionId("fan"))
        check = use_case.support_service.has_supported

        async def check_then_lose_race(wish_id, supporter):
            supported = await check(wish_id, supporter)
            # The competing request deletes right after this read
            await wish_repo.remove_support(wish_id, session_id=SessionId("fan"))
            return supported

        monkeypatch.setattr(
            use_case.support_service, "has_supported", check_then_lose_race
        )

        # Act
        result = await use_case.execute(
            UnsupportWishRequest(wish_id=str(wish.id), session_id="fan")
        )

        # Assert
        assert result.success is False
        assert result.was_supported is False
        stored = await wish_repo.find_by_id(wish.id)
        assert stored.support_count.value == 0
