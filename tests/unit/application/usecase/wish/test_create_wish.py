"""Unit tests for CreateWishUseCase."""

import pytest

from wishes.application.usecase.wish import CreateWishRequest, CreateWishUseCase
from wishes.domain.error import AlreadyPostedError, ValidationError
from wishes.domain.repository import WishRepository
from wishes.domain.value import SessionId, SessionIdentity, UserId, UserIdentity
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestCreateWish:
    """Tests for the create wish flow."""

    @pytest.mark.asyncio
    async def test_anonymous_caller_gets_a_session(self, unit_env):
        """A caller with no identity gets a freshly minted session."""
        # Arrange
        use_case = await unit_env.get(CreateWishUseCase)
        wish_repo = await unit_env.get(WishRepository)

        # Act
        result = await use_case.execute(
            CreateWishRequest(name="Alice", wish="  World peace  ")
        )

        # Assert
        assert result.session_id
        assert result.wish.wish == "World peace"
        assert result.wish.display_name == "Alice"
        assert result.wish.support_count == 0
        stored = await wish_repo.find_by_session_id(SessionId(result.session_id))
        assert stored is not None
        assert stored.author_id == SessionIdentity(id=SessionId(result.session_id))

    @pytest.mark.asyncio
    async def test_existing_session_is_kept(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateWishUseCase)

        # Act
        result = await use_case.execute(
            CreateWishRequest(wish="World peace", session_id="s1")
        )

        # Assert
        assert result.session_id == "s1"
        assert result.wish.name is None
        assert result.wish.display_name == "anonymous"

    @pytest.mark.asyncio
    async def test_signed_in_user_is_the_author(self, unit_env):
        """A signed-in user's wish is authored by the user, not the session."""
        # Arrange
        use_case = await unit_env.get(CreateWishUseCase)
        wish_repo = await unit_env.get(WishRepository)

        # Act
        await use_case.execute(
            CreateWishRequest(wish="World peace", user_id=4, session_id="s1")
        )

        # Assert
        stored = await wish_repo.find_by_user_id(UserId(4))
        assert stored is not None
        assert stored.author_id == UserIdentity(id=UserId(4))

    @pytest.mark.asyncio
    async def test_second_wish_from_same_session_is_rejected(self, unit_env):
        """One wish per identity."""
        # Arrange
        use_case = await unit_env.get(CreateWishUseCase)
        await use_case.execute(CreateWishRequest(wish="First", session_id="s1"))

        # Act & Assert
        with pytest.raises(AlreadyPostedError):
            await use_case.execute(CreateWishRequest(wish="Second", session_id="s1"))

    @pytest.mark.asyncio
    async def test_user_may_post_even_if_session_already_did(self, unit_env):
        """A user's own wish is independent of the session they post from."""
        # Arrange
        use_case = await unit_env.get(CreateWishUseCase)
        await use_case.execute(CreateWishRequest(wish="Anonymous", session_id="s1"))

        # Act
        result = await use_case.execute(
            CreateWishRequest(wish="Signed in", session_id="s1", user_id=9)
        )

        # Assert
        assert result.wish.wish == "Signed in"

    @pytest.mark.asyncio
    async def test_empty_wish_is_rejected_without_saving(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateWishUseCase)
        wish_repo = await unit_env.get(WishRepository)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(CreateWishRequest(wish="   ", session_id="s1"))
        assert await wish_repo.count() == 0
