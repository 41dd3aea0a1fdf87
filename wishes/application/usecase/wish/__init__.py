"""Wish use cases."""

from .create_wish import CreateWishRequest, CreateWishResponse, CreateWishUseCase
from .get_current_wish import (
    GetCurrentWishRequest,
    GetCurrentWishResponse,
    GetCurrentWishUseCase,
)
from .get_latest_wishes import (
    GetLatestWishesRequest,
    GetLatestWishesResponse,
    GetLatestWishesUseCase,
)
from .get_user_wish import GetUserWishRequest, GetUserWishResponse, GetUserWishUseCase
from .update_wish import UpdateWishRequest, UpdateWishResponse, UpdateWishUseCase

__all__ = [
    "CreateWishRequest",
    "CreateWishResponse",
    "CreateWishUseCase",
    "GetCurrentWishRequest",
    "GetCurrentWishResponse",
    "GetCurrentWishUseCase",
    "GetLatestWishesRequest",
    "GetLatestWishesResponse",
    "GetLatestWishesUseCase",
    "GetUserWishRequest",
    "GetUserWishResponse",
    "GetUserWishUseCase",
    "UpdateWishRequest",
    "UpdateWishResponse",
    "UpdateWishUseCase",
]
