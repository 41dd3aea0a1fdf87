"""Unit tests for LoginUseCase and GetCurrentUserUseCase."""

import pytest

from wishes.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
)
from wishes.domain.error import NotFoundError
from wishes.domain.service import JWTService
from wishes.domain.value import UserId
from wishes.util.jwt import JWTError
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestLogin:
    """Tests for the login flow."""

    @pytest.mark.asyncio
    async def test_login_issues_token_for_user(self, unit_env):
        """Login should register the user and issue a token naming them."""
        # Arrange
        login_use_case = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        result = await login_use_case.execute(
            LoginRequest(
                google_id="google-1",
                display_name="Alice",
                email="alice@example.com",
            )
        )

        # Assert
        assert result.display_name == "Alice"
        assert jwt_service.get_user_id_from_token(result.token) == UserId(
            result.user_id
        )

    @pytest.mark.asyncio
    async def test_repeat_login_keeps_user_id(self, unit_env):
        # Arrange
        login_use_case = await unit_env.get(LoginUseCase)
        request = LoginRequest(google_id="google-1", display_name="Alice")

        # Act
        first = await login_use_case.execute(request)
        second = await login_use_case.execute(request)

        # Assert
        assert first.user_id == second.user_id


class TestGetCurrentUser:
    """Tests for resolving the signed-in user from a token."""

    @pytest.mark.asyncio
    async def test_valid_token_returns_user(self, unit_env):
        # Arrange
        login_use_case = await unit_env.get(LoginUseCase)
        use_case = await unit_env.get(GetCurrentUserUseCase)
        login = await login_use_case.execute(
            LoginRequest(google_id="google-1", display_name="Alice")
        )

        # Act
        result = await use_case.execute(GetCurrentUserRequest(token=login.token))

        # Assert
        assert result.user.id == login.user_id
        assert result.user.display_name == "Alice"

    @pytest.mark.asyncio
    async def test_invalid_token_raises(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await use_case.execute(GetCurrentUserRequest(token="not-a-jwt"))

    @pytest.mark.asyncio
    async def test_token_for_unknown_user_raises(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetCurrentUserUseCase)
        jwt_service = await unit_env.get(JWTService)
        token = jwt_service.create_token(UserId(999), "Ghost")

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(GetCurrentUserRequest(token=token))
