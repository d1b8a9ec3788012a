"""Registration endpoint infrastructure providers."""

from dishka import Scope, provide

from betagate.adapter.registration import HttpRegistrationClient
from betagate.config import BetaSettings
from betagate.domain.service import RegistrationClient
from betagate.util.di.base import ProviderBase


class RegistrationProvider(ProviderBase):
    """Registration component base."""

    __mock_component__ = "registration"


class ProdRegistrationProvider(RegistrationProvider):
    """Production registration provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_registration_client(self, beta_settings: BetaSettings) -> RegistrationClient:
        """Provide HTTP registration client.

        Raises:
            ValueError: If no registration URL is configured
        """
        if not beta_settings.registration_url:
            raise ValueError("Registration URL must be configured")

        return HttpRegistrationClient(
            registration_url=beta_settings.registration_url,
            timeout=beta_settings.registration_timeout,
        )
