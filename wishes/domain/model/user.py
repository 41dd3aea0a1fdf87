"""User entity.

Users sign in with Google. A user's wish is keyed by their UserId instead of
the anonymous session that would otherwise own it.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from wishes.domain.error import ValidationError
from wishes.domain.model.common import DomainModel
from wishes.domain.value import UserId


class GoogleProfile(DomainModel):
    """Profile returned by Google after a completed OAuth exchange."""

    id: str = Field(min_length=1)
    display_name: str = Field(min_length=1)
    email: Optional[str] = None
    picture: Optional[str] = None


class User(DomainModel):
    """Registered user.

    ``id`` is None until the user has been saved; storage assigns it.
    """

    id: Optional[UserId] = None
    google_id: str = Field(min_length=1)
    display_name: str = Field(min_length=1)
    email: Optional[str] = None
    picture: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_google(cls, profile: GoogleProfile) -> "User":
        """Build an unsaved user from a Google profile."""
        return cls(
            google_id=profile.id,
            display_name=profile.display_name,
            email=profile.email,
            picture=profile.picture,
        )

    def update_profile(
        self, display_name: str, picture: Optional[str] = None
    ) -> "User":
        """Return a copy with refreshed profile information.

        Raises:
            ValidationError: If the display name is empty
        """
        if not display_name or not display_name.strip():
            raise ValidationError("Display name cannot be empty")
        return self.model_copy(
            update={
                "display_name": display_name,
                "picture": picture if picture is not None else self.picture,
            }
        )
