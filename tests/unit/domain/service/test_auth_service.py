"""Unit tests for AuthService."""

import pytest

from wishes.domain.error import ValidationError
from wishes.domain.model import GoogleProfile, User
from wishes.domain.service import AuthService
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


def _profile(display_name: str = "Alice", picture: str | None = None) -> GoogleProfile:
    return GoogleProfile(
        id="google-123",
        display_name=display_name,
        email="alice@example.com",
        picture=picture,
    )


class TestAuthenticateWithGoogle:
    """Tests for authenticate_with_google method."""

    @pytest.mark.asyncio
    async def test_creates_new_user(self, unit_env):
        """First sign-in registers the user."""
        # Arrange
        auth_service = await unit_env.get(AuthService)

        # Act
        user = await auth_service.authenticate_with_google(_profile())

        # Assert
        assert user.id is not None
        assert user.google_id == "google-123"
        assert user.display_name == "Alice"

    @pytest.mark.asyncio
    async def test_refreshes_existing_user(self, unit_env):
        """Returning users keep their ID and get an updated profile."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        first = await auth_service.authenticate_with_google(_profile())

        # Act
        second = await auth_service.authenticate_with_google(
            _profile(display_name="Alice B.", picture="https://example.com/a.png")
        )

        # Assert
        assert second.id == first.id
        assert second.display_name == "Alice B."
        assert second.picture == "https://example.com/a.png"


class TestSerializeUser:
    """Tests for serialize_user and deserialize_user."""

    @pytest.mark.asyncio
    async def test_round_trip(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        user = await auth_service.authenticate_with_google(_profile())

        # Act
        restored = await auth_service.deserialize_user(
            auth_service.serialize_user(user)
        )

        # Assert
        assert restored == user

    @pytest.mark.asyncio
    async def test_unsaved_user_cannot_be_serialized(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(ValidationError):
            auth_service.serialize_user(User(google_id="g", display_name="Bob"))

    @pytest.mark.asyncio
    async def test_malformed_value_yields_none(self, unit_env):
        auth_service = await unit_env.get(AuthService)

        assert await auth_service.deserialize_user("not-an-id") is None
        assert await auth_service.deserialize_user("999") is None
