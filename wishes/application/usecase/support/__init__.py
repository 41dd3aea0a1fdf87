"""Support use cases."""

from .get_wish_support_status import (
    GetWishSupportStatusRequest,
    GetWishSupportStatusResponse,
    GetWishSupportStatusUseCase,
)
from .support_wish import SupportWishRequest, SupportWishResponse, SupportWishUseCase
from .unsupport_wish import (
    UnsupportWishRequest,
    UnsupportWishResponse,
    UnsupportWishUseCase,
)

__all__ = [
    "GetWishSupportStatusRequest",
    "GetWishSupportStatusResponse",
    "GetWishSupportStatusUseCase",
    "SupportWishRequest",
    "SupportWishResponse",
    "SupportWishUseCase",
    "UnsupportWishRequest",
    "UnsupportWishResponse",
    "UnsupportWishUseCase",
]
