"""Add beta user use case."""

from datetime import datetime
from typing import Any

import logfire
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from betagate.application.usecase.base import BaseUseCase
from betagate.domain.model import BetaInvite
from betagate.domain.service import BetaInviteService


class AddBetaUserRequest(BaseModel):
    """Request to mint an invite."""

    email: str | None = None
    wildcard: bool = False
    golden_ticket: bool = False
    redirect_to: str | None = None
    extra: dict[str, Any] = Field(default_factory=dict)  # Additional field values


class BetaInviteItem(BaseModel):
    """Invite as returned to API callers.

    Serialized with camelCase keys; additional fields are merged flat.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    id: str
    email: str | None = None
    code: str
    wildcard: bool
    golden_ticket: bool
    added_at: datetime

    @classmethod
    def from_invite(cls, invite: BetaInvite) -> "BetaInviteItem":
        """Build the API view of an invite."""
        return cls(
            id=str(invite.id),
            email=invite.email,
            code=invite.code.root,
            wildcard=invite.wildcard,
            golden_ticket=invite.golden_ticket,
            added_at=invite.added_at,
            **invite.extra,
        )


class AddBetaUserUseCase(BaseUseCase[AddBetaUserRequest, BetaInviteItem]):
    """Use case for minting an invite code."""

    def __init__(self, beta_invite_service: BetaInviteService) -> None:
        """Initialize use case.

        Args:
            beta_invite_service: Beta invite domain service
        """
        self.beta_invite_service = beta_invite_service

    async def execute(self, request: AddBetaUserRequest) -> BetaInviteItem:
        """Mint an invite.

        Args:
            request: Add beta user request

        Returns:
            The created invite, including its code

        Raises:
            InvalidRequestError: If neither email nor wildcard is given
            DuplicateUserError: If the email already holds an invite
            ValidationError: If additional field values are invalid
        """
        with logfire.span(
            "add_beta_user", email=request.email, wildcard=request.wildcard
        ):
            invite = await self.beta_invite_service.mint_invite(
                email=request.email,
                wildcard=request.wildcard,
                golden_ticket=request.golden_ticket,
                redirect_to=request.redirect_to,
                extra=request.extra,
            )
            return BetaInviteItem.from_invite(invite)
