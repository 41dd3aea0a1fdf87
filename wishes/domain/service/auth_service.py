"""Authentication domain service.

Replaces a globally configured auth singleton: one AuthService is built by
the DI container and handed to whatever needs it.
"""

import logfire

from wishes.domain.error import ValidationError
from wishes.domain.model import GoogleProfile, User
from wishes.domain.repository import UserRepository
from wishes.domain.value import UserId

from .base import Service


class AuthService(Service):
    """Domain service for Google-backed user accounts."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def authenticate_with_google(self, profile: GoogleProfile) -> User:
        """Find or create the user for a verified Google profile.

        Existing users get their display name and picture refreshed.

        Args:
            profile: Profile from a completed Google OAuth exchange

        Returns:
            The saved user
        """
        with logfire.span("auth_service.authenticate_with_google"):
            existing = await self.user_repository.find_by_google_id(profile.id)

            if existing:
                updated = existing.update_profile(profile.display_name, profile.picture)
                saved = await self.user_repository.save(updated)
                logfire.info("Existing user signed in", user_id=str(saved.id))
                return saved

            saved = await self.user_repository.save(User.from_google(profile))
            logfire.info("New user registered", user_id=str(saved.id))
            return saved

    def serialize_user(self, user: User) -> str:
        """Turn a user into the value kept in the caller's session.

        Raises:
            ValidationError: If the user has not been saved yet
        """
        if user.id is None:
            raise ValidationError("Cannot serialize a user without an ID")
        return str(user.id)

    async def deserialize_user(self, value: str) -> User | None:
        """Load the user a serialized value refers to.

        Returns:
            The user, or None if the value is malformed or the user is gone
        """
        try:
            user_id = UserId.parse(value)
        except ValidationError:
            logfire.warn("Malformed serialized user", value=value)
            return None
        return await self.user_repository.find_by_id(user_id)
