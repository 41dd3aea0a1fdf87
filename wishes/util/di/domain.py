"""Domain layer DI providers."""

from dishka import Scope, provide

from wishes.config import AuthSettings
from wishes.domain.repository import UserRepository, WishRepository
from wishes.domain.service import (
    AuthService,
    JWTService,
    SupportService,
    WishService,
)
from wishes.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(self, user_repository: UserRepository) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(user_repository=user_repository)

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service (stateless, shared)."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_wish_service(self, wish_repository: WishRepository) -> WishService:
        """Provide wish domain service."""
        return WishService(wish_repository=wish_repository)

    @provide
    def get_support_service(self, wish_repository: WishRepository) -> SupportService:
        """Provide support domain service."""
        return SupportService(wish_repository=wish_repository)
