"""Caller identity: a registered user or an anonymous session.

Identity is a tagged union discriminated by ``kind``. It is used wherever
"who is acting" matters: authorship, update authorization and support
eligibility.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from wishes.domain.value.common import ValueObject
from wishes.domain.value.identifiers import SessionId, UserId


class UserIdentity(ValueObject):
    """Identity of a signed-in user."""

    kind: Literal["user"] = "user"
    id: UserId

    def __str__(self) -> str:
        return f"user:{self.id}"


class SessionIdentity(ValueObject):
    """Identity of an anonymous browser session."""

    kind: Literal["session"] = "session"
    id: SessionId

    def __str__(self) -> str:
        return f"session:{self.id}"


Identity = Annotated[
    Union[UserIdentity, SessionIdentity], Field(discriminator="kind")
]


def resolve_identity(
    user_id: Optional[UserId] = None, session_id: Optional[SessionId] = None
) -> Optional[Union[UserIdentity, SessionIdentity]]:
    """Resolve the acting identity.

    An authenticated user takes priority over an anonymous session.

    Args:
        user_id: Authenticated user ID, if any
        session_id: Anonymous session ID, if any

    Returns:
        The resolved identity, or None when neither is present
    """
    if user_id is not None:
        return UserIdentity(id=user_id)
    if session_id is not None:
        return SessionIdentity(id=session_id)
    return None
