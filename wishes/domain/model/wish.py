"""Wish aggregate root.

A wish is the single post an identity (signed-in user or anonymous session)
may publish. Other identities can support it; the author cannot.
"""

from datetime import datetime, timezone
from typing import Literal, Optional

from pydantic import Field, model_validator

from wishes.domain.error import InvariantViolation, SelfSupportError
from wishes.domain.model.common import DomainModel
from wishes.domain.value import (
    Identity,
    SupportCount,
    WishContent,
    WishId,
    WishName,
)

ANONYMOUS_NAME = "anonymous"

SupportErrorCode = Literal["SELF_SUPPORT_NOT_ALLOWED"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _to_name(name: Optional[str]) -> Optional[WishName]:
    """Blank names mean "no name"."""
    if name is None or not name.strip():
        return None
    return WishName(name)


class SupportValidation(DomainModel):
    """Result of checking whether an identity may support a wish."""

    is_valid: bool
    error_code: Optional[SupportErrorCode] = None


class Wish(DomainModel):
    """Wish aggregate root.

    Business rules:
    - Content is never empty (enforced by WishContent)
    - support_count always equals the number of supporters
    - The author is never one of the supporters
    - One wish per author identity (enforced at creation by the use case and
      by unique indexes in storage, not by the entity)
    """

    id: WishId
    content: WishContent
    name: Optional[WishName] = None
    author_id: Identity
    support_count: SupportCount = Field(default_factory=SupportCount.zero)
    supporters: frozenset[Identity] = frozenset()
    created_at: datetime = Field(default_factory=_utcnow)

    @model_validator(mode="after")
    def validate_supporters(self) -> "Wish":
        """Keep the cached count and the supporter set consistent."""
        if self.support_count.value != len(self.supporters):
            raise InvariantViolation(
                f"Support count {self.support_count.value} does not match "
                f"{len(self.supporters)} supporters"
            )
        if self.author_id in self.supporters:
            raise InvariantViolation("Author cannot be a supporter of their own wish")
        return self

    @classmethod
    def create(
        cls, content: str, name: Optional[str] = None, *, author: Identity
    ) -> "Wish":
        """Create a brand-new wish.

        Args:
            content: Wish text (trimmed; must not be empty)
            name: Optional display name
            author: Identity that owns the wish

        Returns:
            New wish with a fresh ID, no supporters and created_at=now

        Raises:
            ValidationError: If content is empty or name/content too long
        """
        return cls(
            id=WishId.generate(),
            content=WishContent(content),
            name=_to_name(name),
            author_id=author,
            support_count=SupportCount.zero(),
            supporters=frozenset(),
            created_at=_utcnow(),
        )

    @property
    def display_name(self) -> str:
        """Name shown in the feed."""
        return self.name.value if self.name else ANONYMOUS_NAME

    def update(self, new_name: Optional[str], new_content: str) -> "Wish":
        """Replace name and content.

        ID, author, creation time and supporters are preserved.

        Raises:
            ValidationError: If new content is empty or name/content too long
        """
        return self.model_copy(
            update={"content": WishContent(new_content), "name": _to_name(new_name)}
        )

    def can_support(self, supporter: Identity) -> SupportValidation:
        """Check whether ``supporter`` may support this wish."""
        if supporter == self.author_id:
            return SupportValidation(
                is_valid=False, error_code="SELF_SUPPORT_NOT_ALLOWED"
            )
        return SupportValidation(is_valid=True)

    def is_supported_by(self, identity: Identity) -> bool:
        return identity in self.supporters

    def add_supporter(self, supporter: Identity) -> "Wish":
        """Return a copy with ``supporter`` added (no-op if already present).

        Raises:
            SelfSupportError: If ``supporter`` is the author
        """
        if not self.can_support(supporter).is_valid:
            raise SelfSupportError()
        if supporter in self.supporters:
            return self
        return self.model_copy(
            update={
                "supporters": self.supporters | {supporter},
                "support_count": self.support_count.increment(),
            }
        )

    def remove_supporter(self, supporter: Identity) -> "Wish":
        """Return a copy with ``supporter`` removed (no-op if absent)."""
        if supporter not in self.supporters:
            return self
        return self.model_copy(
            update={
                "supporters": self.supporters - {supporter},
                "support_count": self.support_count.decrement(),
            }
        )


class WishWithSupportStatus(DomainModel):
    """A wish as seen by a particular viewer."""

    wish: Wish
    is_supported: bool = False
