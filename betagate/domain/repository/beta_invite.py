"""Beta invite repository interface."""

from abc import ABC, abstractmethod

from betagate.domain.model.beta_invite import BetaInvite
from betagate.domain.value import InviteCode


class BetaInviteRepository(ABC):
    """Repository for BetaInvite entity.

    Defines the contract for invite persistence operations.
    Implementations must enforce email and code uniqueness.
    """

    @abstractmethod
    async def find_by_email(self, email: str) -> BetaInvite | None:
        """Find the invite bound to an email.

        Args:
            email: Invitee email address

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_code(self, code: InviteCode) -> BetaInvite | None:
        """Find an invite by code, whatever its email or wildcard flag.

        Args:
            code: The invite code

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email_and_code(
        self, email: str, code: InviteCode
    ) -> BetaInvite | None:
        """Find an invite matching both email and code.

        Args:
            email: Invitee email address
            code: The invite code

        Returns:
            The invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_wildcard_by_code(self, code: InviteCode) -> BetaInvite | None:
        """Find a wildcard invite by code.

        Args:
            code: The invite code

        Returns:
            The wildcard invite if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, invite: BetaInvite) -> BetaInvite:
        """Insert a new invite.

        Args:
            invite: The invite to save

        Returns:
            The saved invite

        Raises:
            IntegrityError: If the email or code is already taken
        """
        pass

    @abstractmethod
    async def delete_by_email(self, email: str) -> bool:
        """Delete the invite bound to an email.

        Args:
            email: Invitee email address

        Returns:
            True if an invite was deleted, False otherwise
        """
        pass

    @abstractmethod
    async def consume_wildcard(self, code: InviteCode) -> BetaInvite | None:
        """Atomically delete a wildcard invite and return it.

        Only one caller can consume a given code; concurrent callers get None.

        Args:
            code: The wildcard invite code

        Returns:
            The deleted invite, None if no wildcard invite had this code
        """
        pass
