"""Application layer DI providers."""

from dishka import Scope, provide

from wishes.application.usecase.auth import GetCurrentUserUseCase, LoginUseCase
from wishes.application.usecase.support import (
    GetWishSupportStatusUseCase,
    SupportWishUseCase,
    UnsupportWishUseCase,
)
from wishes.application.usecase.wish import (
    CreateWishUseCase,
    GetCurrentWishUseCase,
    GetLatestWishesUseCase,
    GetUserWishUseCase,
    UpdateWishUseCase,
)
from wishes.config import FeedSettings
from wishes.domain.service import (
    AuthService,
    JWTService,
    SupportService,
    WishService,
)
from wishes.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, auth_service: AuthService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, auth_service=auth_service)

    # Wish use cases
    @provide
    def get_create_wish_use_case(self, wish_service: WishService) -> CreateWishUseCase:
        """Provide create wish use case."""
        return CreateWishUseCase(wish_service=wish_service)

    @provide
    def get_update_wish_use_case(self, wish_service: WishService) -> UpdateWishUseCase:
        """Provide update wish use case."""
        return UpdateWishUseCase(wish_service=wish_service)

    @provide
    def get_get_user_wish_use_case(
        self, wish_service: WishService
    ) -> GetUserWishUseCase:
        """Provide get user wish use case."""
        return GetUserWishUseCase(wish_service=wish_service)

    @provide
    def get_get_current_wish_use_case(
        self, wish_service: WishService
    ) -> GetCurrentWishUseCase:
        """Provide get current wish use case."""
        return GetCurrentWishUseCase(wish_service=wish_service)

    @provide
    def get_get_latest_wishes_use_case(
        self, wish_service: WishService, feed_settings: FeedSettings
    ) -> GetLatestWishesUseCase:
        """Provide get latest wishes use case."""
        return GetLatestWishesUseCase(
            wish_service=wish_service, feed_settings=feed_settings
        )

    # Support use cases
    @provide
    def get_support_wish_use_case(
        self, wish_service: WishService, support_service: SupportService
    ) -> SupportWishUseCase:
        """Provide support wish use case."""
        return SupportWishUseCase(
            wish_service=wish_service, support_service=support_service
        )

    @provide
    def get_unsupport_wish_use_case(
        self, support_service: SupportService
    ) -> UnsupportWishUseCase:
        """Provide unsupport wish use case."""
        return UnsupportWishUseCase(support_service=support_service)

    @provide
    def get_get_wish_support_status_use_case(
        self, wish_service: WishService, support_service: SupportService
    ) -> GetWishSupportStatusUseCase:
        """Provide get wish support status use case."""
        return GetWishSupportStatusUseCase(
            wish_service=wish_service, support_service=support_service
        )
