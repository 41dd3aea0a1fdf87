"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Iterable, Optional

from wishes.domain.model import User, Wish
from wishes.domain.value import (
    Identity,
    SessionId,
    SessionIdentity,
    SupportCount,
    UserId,
    UserIdentity,
    WishContent,
    WishId,
    WishName,
)


def row_to_identity(row: Dict[str, Any]) -> Identity:
    """Build the identity stored in a row's ``user_id``/``session_id`` columns.

    A registered user takes priority over the session.
    """
    if row.get("user_id") is not None:
        return UserIdentity(id=UserId(row["user_id"]))
    return SessionIdentity(id=SessionId(row["session_id"]))


def row_to_wish(row: Dict[str, Any], support_rows: Iterable[Dict[str, Any]]) -> Wish:
    """Convert database rows to a Wish domain model.

    The support count is derived from the loaded supporters so the aggregate
    stays consistent even if the cached column drifted.

    Args:
        row: Wishes row as dict
        support_rows: The wish's supports rows as dicts

    Returns:
        Wish domain model
    """
    supporters = frozenset(row_to_identity(support) for support in support_rows)
    return Wish(
        id=WishId(str(row["id"])),
        content=WishContent(row["wish"]),
        name=WishName(row["name"]) if row.get("name") else None,
        author_id=row_to_identity(row),
        support_count=SupportCount(len(supporters)),
        supporters=supporters,
        created_at=row["created_at"],
    )


def wish_to_dict(wish: Wish, owner_user_id: Optional[UserId] = None) -> Dict[str, Any]:
    """Convert Wish domain model to database dict.

    Args:
        wish: Wish domain model
        owner_user_id: Registered owner; defaults to the author when it is a user

    Returns:
        Dict suitable for database insertion/update
    """
    author = wish.author_id
    if owner_user_id is None and isinstance(author, UserIdentity):
        owner_user_id = author.id

    return {
        "id": wish.id.value,
        "name": wish.name.value if wish.name else None,
        "wish": wish.content.value,
        "created_at": wish.created_at,
        "user_id": owner_user_id.value if owner_user_id else None,
        "session_id": author.id.value if isinstance(author, SessionIdentity) else None,
        "support_count": wish.support_count.value,
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        google_id=row["google_id"],
        display_name=row["display_name"],
        email=row.get("email"),
        picture=row.get("picture"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    The ID is left out when the user has not been saved yet so the database
    can assign it.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = {
        "google_id": user.google_id,
        "display_name": user.display_name,
        "email": user.email,
        "picture": user.picture,
        "created_at": user.created_at,
    }
    if user.id is not None:
        data["id"] = user.id.value
    return data
