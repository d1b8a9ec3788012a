"""Invite link delivery interface."""

from abc import ABC, abstractmethod

from betagate.domain.value import InviteLink


class InviteNotifier(ABC):
    """Delivers invite links to invitees (usually by email)."""

    @abstractmethod
    async def send_invite_link(self, link: InviteLink) -> None:
        """Send an invite link.

        Args:
            link: Recipient email, invite URL and code
        """
        pass


class NoopInviteNotifier(InviteNotifier):
    """Default notifier: delivers nothing."""

    async def send_invite_link(self, link: InviteLink) -> None:
        return None
