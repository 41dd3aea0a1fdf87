"""Configuration providers, shared by production and test containers."""

from dishka import Scope, provide

from wishes.config import AuthSettings, FeedSettings, Settings
from wishes.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Exposes ``Settings`` and the setting groups services depend on."""

    scope = Scope.APP

    @provide
    def settings(self) -> Settings:
        return Settings()

    @provide
    def auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def feed_settings(self, settings: Settings) -> FeedSettings:
        return settings.feed
