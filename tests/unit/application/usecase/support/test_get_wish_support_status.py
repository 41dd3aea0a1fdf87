"""Unit tests for GetWishSupportStatusUseCase."""

import pytest

from wishes.application.usecase.support import (
    GetWishSupportStatusRequest,
    GetWishSupportStatusUseCase,
)
from wishes.domain.repository import WishRepository
from wishes.domain.value import SessionId
from tests.factories import make_wish, session_identity
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestGetWishSupportStatus:
    """Tests for reading the caller's support status."""

    @pytest.mark.asyncio
    async def test_supporter_sees_status_and_current_count(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetWishSupportStatusUseCase)
        wish_repo = await unit_env.get(WishRepository)
        wish = await wish_repo.save(make_wish(author=session_identity("author")))
        await wish_repo.add_support(wish.id, session_id=SessionId("fan"))

        # Act
        result = await use_case.execute(
            GetWishSupportStatusRequest(wish_id=str(wish.id), session_id="fan")
        )

        # Assert
        assert result.is_supported is True
        assert result.wish.support_count == 1
        assert result.wish.is_supported is True

    @pytest.mark.asyncio
    async def test_no_identity_is_not_supported(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetWishSupportStatusUseCase)
        wish_repo = await unit_env.get(WishRepository)
        wish = await wish_repo.save(make_wish(author=session_identity("author")))

        # Act
        result = await use_case.execute(
            GetWishSupportStatusRequest(wish_id=str(wish.id))
        )

        # Assert
        assert result.is_supported is False
        assert result.wish is not None

    @pytest.mark.asyncio
    async def test_missing_wish(self, unit_env):
        use_case = await unit_env.get(GetWishSupportStatusUseCase)

        result = await use_case.execute(
            GetWishSupportStatusRequest(wish_id="missing", session_id="fan")
        )

        assert result.is_supported is False
        assert result.wish is None
