"""Invite link delivery adapters."""

import httpx
import logfire

from betagate.adapter.error import NotificationError
from betagate.domain.service.invite_notifier import InviteNotifier
from betagate.domain.value import InviteLink


class WebhookInviteNotifier(InviteNotifier):
    """Posts invite links to a webhook (e.g. a mailer service).

    No retries; the caller owns the retry policy.
    """

    def __init__(
        self,
        webhook_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize webhook notifier.

        Args:
            webhook_url: URL receiving ``{email, url, code}`` as JSON
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests)
        """
        self.webhook_url = webhook_url
        self.timeout = timeout
        self.transport = transport

    async def send_invite_link(self, link: InviteLink) -> None:
        """Post the invite link.

        Raises:
            NotificationError: If the webhook is unreachable or rejects the link
        """
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.webhook_url,
                    json=link.model_dump(),
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Invite webhook HTTP error", error=str(e))
            raise NotificationError(f"HTTP error sending invite link: {e}")

        if response.is_error:
            logfire.error(
                "Invite webhook rejected link",
                status_code=response.status_code,
                error_detail=response.text,
            )
            raise NotificationError(
                f"Invite webhook returned {response.status_code}"
            )


class RecordingInviteNotifier(InviteNotifier):
    """Mock notifier for testing.

    Keeps sent links instead of delivering them.
    """

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[InviteLink] = []

    async def send_invite_link(self, link: InviteLink) -> None:
        """Record the link, or fail when configured to."""
        if self.fail:
            raise NotificationError("Delivery failed")
        self.sent.append(link)
