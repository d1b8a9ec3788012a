"""In-memory beta invite repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from betagate.domain.model.beta_invite import BetaInvite
from betagate.domain.repository.beta_invite import BetaInviteRepository
from betagate.domain.value import InviteCode


class InMemoryBetaInviteRepository(BetaInviteRepository):
    """In-memory implementation of BetaInviteRepository for testing."""

    def __init__(self) -> None:
        self._invites: list[BetaInvite] = []

    async def find_by_email(self, email: str) -> Optional[BetaInvite]:
        """Find the invite bound to an email."""
        for invite in self._invites:
            if invite.email is not None and invite.email == email:
                return invite
        return None

    async def find_by_code(self, code: InviteCode) -> Optional[BetaInvite]:
        """Find an invite by code."""
        for invite in self._invites:
            if invite.code == code:
                return invite
        return None

    async def find_by_email_and_code(
        self, email: str, code: InviteCode
    ) -> Optional[BetaInvite]:
        """Find an invite matching both email and code."""
        for invite in self._invites:
            if invite.email == email and invite.code == code:
                return invite
        return None

    async def find_wildcard_by_code(self, code: InviteCode) -> Optional[BetaInvite]:
        """Find a wildcard invite by code."""
        for invite in self._invites:
            if invite.wildcard and invite.code == code:
                return invite
        return None

    async def save(self, invite: BetaInvite) -> BetaInvite:
        """Insert an invite.

        Raises:
            IntegrityError: If the email or code is already taken
        """
        if invite.email and await self.find_by_email(invite.email):
            raise IntegrityError("Duplicate beta email", None, Exception())
        if await self.find_by_code(invite.code):
            raise IntegrityError("Duplicate beta code", None, Exception())

        self._invites.append(invite)
        return invite

    async def delete_by_email(self, email: str) -> bool:
        """Delete the invite bound to an email."""
        invite = await self.find_by_email(email)
        if invite is None:
            return False
        self._invites.remove(invite)
        return True

    async def consume_wildcard(self, code: InviteCode) -> Optional[BetaInvite]:
        """Delete a wildcard invite and return it."""
        invite = await self.find_wildcard_by_code(code)
        if invite is None:
            return None
        self._invites.remove(invite)
        return invite
