"""Core DI providers."""

from dishka import Scope, provide

from fixity.config import Settings
from fixity.util.di.base import ProviderBase


class ConfigProvider(ProviderBase):
    """Config component base."""

    __mock_component__ = "config"


class ProdConfigProvider(ConfigProvider):
    """Production config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()
