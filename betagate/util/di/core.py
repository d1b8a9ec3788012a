"""Core DI providers (non-mockable)."""

from dishka import Scope, from_context, provide

from betagate.config import BetaSettings, Settings
from betagate.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Config provider - concrete, no mocks needed.

    Settings are built once at process start and passed in as container
    context; nothing below re-reads the environment.
    """

    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def provide_beta_settings(self, settings: Settings) -> BetaSettings:
        """Provide beta settings."""
        return settings.beta
