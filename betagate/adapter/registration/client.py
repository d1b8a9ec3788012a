"""HTTP client for the account registration endpoint."""

from typing import Any

import httpx
import logfire

from betagate.adapter.error import RegistrationError
from betagate.domain.service.registration import RegistrationClient
from betagate.domain.value import RegistrationPayload, RegistrationResult


class HttpRegistrationClient(RegistrationClient):
    """Posts sign-ups to the registration endpoint as JSON.

    Non-2xx responses are returned as results, not raised.
    """

    def __init__(
        self,
        registration_url: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize registration client.

        Args:
            registration_url: Absolute URL of the account-creation endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests)
        """
        self.registration_url = registration_url
        self.timeout = timeout
        self.transport = transport

    async def register(
        self, payload: RegistrationPayload, headers: dict[str, str]
    ) -> RegistrationResult:
        """Forward a sign-up.

        Args:
            payload: Account details
            headers: Extra headers, including the gating secret

        Returns:
            Status and decoded body from the endpoint

        Raises:
            RegistrationError: If the request could not be completed
        """
        with logfire.span(
            "registration_client.register",
            url=self.registration_url,
            email=payload.email,
        ):
            try:
                async with httpx.AsyncClient(transport=self.transport) as client:
                    response = await client.post(
                        self.registration_url,
                        json=payload.to_body(),
                        headers={"Content-Type": "application/json", **headers},
                        timeout=self.timeout,
                    )
            except httpx.HTTPError as e:
                logfire.error("Registration request failed", error=str(e))
                raise RegistrationError(f"HTTP error during registration: {e}")

            if response.is_error:
                logfire.warn(
                    "Registration endpoint returned an error",
                    status_code=response.status_code,
                )
            else:
                logfire.info(
                    "Registration forwarded", status_code=response.status_code
                )

            return RegistrationResult(
                status_code=response.status_code,
                body=_decode_body(response),
            )


class MockRegistrationClient(RegistrationClient):
    """Mock registration client for testing.

    Records every call and answers with a deterministic account.
    """

    def __init__(self, status_code: int = 200) -> None:
        self.status_code = status_code
        self.calls: list[tuple[RegistrationPayload, dict[str, str]]] = []

    async def register(
        self, payload: RegistrationPayload, headers: dict[str, str]
    ) -> RegistrationResult:
        """Record the call and return a mock account."""
        self.calls.append((payload, headers))
        body = payload.to_body()
        body.pop("password")
        return RegistrationResult(
            status_code=self.status_code,
            body={"user": body},
        )


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    if "application/json" in response.headers.get("content-type", ""):
        try:
            return response.json()
        except ValueError:
            return response.text
    return response.text

