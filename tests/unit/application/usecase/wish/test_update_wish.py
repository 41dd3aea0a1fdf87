"""Unit tests for UpdateWishUseCase."""

import pytest

from wishes.application.usecase.wish import UpdateWishRequest, UpdateWishUseCase
from wishes.domain.error import AuthorizationError, ValidationError, WishUpdateError
from wishes.domain.repository import WishRepository
from wishes.domain.value import SessionId, UserId
from tests.factories import make_wish, session_identity, user_identity
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestUpdateWish:
    """Tests for the update wish flow."""

    @pytest.mark.asyncio
    async def test_session_author_can_edit(self, unit_env):
        """Editing keeps the ID, creation time and supports."""
        # Arrange
        use_case = await unit_env.get(UpdateWishUseCase)
        wish_repo = await unit_env.get(WishRepository)
        wish = await wish_repo.save(make_wish(author=session_identity("s1")))
        await wish_repo.add_support(wish.id, session_id=SessionId("fan"))

        # Act
        result = await use_case.execute(
            UpdateWishRequest(name="Bob", wish="Clean oceans", session_id="s1")
        )

        # Assert
        assert result.message == "Wish updated successfully"
        assert result.wish.id == str(wish.id)
        assert result.wish.wish == "Clean oceans"
        assert result.wish.name == "Bob"
        assert result.wish.created_at == wish.created_at
        assert result.wish.support_count == 1

    @pytest.mark.asyncio
    async def test_user_author_can_edit(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateWishUseCase)
        wish_repo = await unit_env.get(WishRepository)
        await wish_repo.save(make_wish(author=user_identity(2)), UserId(2))

        # Act
        result = await use_case.execute(UpdateWishRequest(wish="Edited", user_id=2))

        # Assert
        assert result.wish.wish == "Edited"

    @pytest.mark.asyncio
    async def test_no_identity_is_unauthorized(self, unit_env):
        """Callers without any identity are rejected before storage is read."""
        use_case = await unit_env.get(UpdateWishUseCase)

        with pytest.raises(AuthorizationError):
            await use_case.execute(UpdateWishRequest(wish="Edited"))

    @pytest.mark.asyncio
    async def test_caller_without_wish_cannot_update(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateWishUseCase)
        wish_repo = await unit_env.get(WishRepository)
        await wish_repo.save(make_wish(author=session_identity("s1")))

        # Act & Assert
        with pytest.raises(WishUpdateError):
            await use_case.execute(UpdateWishRequest(wish="Edited", session_id="s2"))

    @pytest.mark.asyncio
    async def test_empty_content_is_rejected(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateWishUseCase)
        wish_repo = await unit_env.get(WishRepository)
        wish = await wish_repo.save(make_wish(author=session_identity("s1")))

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(UpdateWishRequest(wish=" ", session_id="s1"))
        stored = await wish_repo.find_by_id(wish.id)
        assert stored.content == wish.content
