"""Remove beta user use case."""

from pydantic import BaseModel

from betagate.application.usecase.base import BaseUseCase
from betagate.domain.service import BetaInviteService


class RemoveBetaUserRequest(BaseModel):
    """Remove beta user request."""

    email: str


class RemoveBetaUserResponse(BaseModel):
    """Remove beta user response."""

    message: str


class RemoveBetaUserUseCase(
    BaseUseCase[RemoveBetaUserRequest, RemoveBetaUserResponse]
):
    """Use case for revoking the invite bound to an email."""

    def __init__(self, beta_invite_service: BetaInviteService) -> None:
        self.beta_invite_service = beta_invite_service

    async def execute(self, request: RemoveBetaUserRequest) -> RemoveBetaUserResponse:
        """Revoke an invite.

        Raises:
            UserNotFoundError: If no invite exists for the email
        """
        await self.beta_invite_service.revoke_invite(request.email)
        return RemoveBetaUserResponse(message="User removed from the beta")
