"""Interface to the external account registration mechanism."""

from abc import ABC, abstractmethod

from betagate.domain.value import RegistrationPayload, RegistrationResult


class RegistrationClient(ABC):
    """Forwards sign-ups to the service that creates accounts."""

    @abstractmethod
    async def register(
        self, payload: RegistrationPayload, headers: dict[str, str]
    ) -> RegistrationResult:
        """Create an account.

        Args:
            payload: Account details
            headers: Extra request headers (carries the gating secret)

        Returns:
            The registration endpoint's response, unmodified

        Raises:
            RegistrationError: If the endpoint cannot be reached
        """
        pass
