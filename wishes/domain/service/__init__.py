"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .jwt_service import JWTService
from .support_service import SupportService
from .wish_service import WishService

__all__ = [
    "AuthService",
    "JWTService",
    "Service",
    "SupportService",
    "WishService",
]
