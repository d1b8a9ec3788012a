"""Invite notification infrastructure providers."""

from dishka import Scope, provide

from betagate.adapter.notification import WebhookInviteNotifier
from betagate.config import BetaSettings
from betagate.domain.service import InviteNotifier, NoopInviteNotifier
from betagate.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notification"


class ProdNotificationProvider(NotificationProvider):
    """Production notification provider.

    Posts invite links to the configured webhook; without one, delivery is
    a no-op and embedding applications are expected to provide their own
    InviteNotifier.
    """

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_invite_notifier(self, beta_settings: BetaSettings) -> InviteNotifier:
        """Provide invite notifier."""
        if beta_settings.invite_webhook_url:
            return WebhookInviteNotifier(webhook_url=beta_settings.invite_webhook_url)
        return NoopInviteNotifier()
