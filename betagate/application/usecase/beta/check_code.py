"""Check beta code use case."""

from pydantic import BaseModel

from betagate.application.usecase.base import BaseUseCase
from betagate.domain.service import BetaInviteService


class CheckCodeRequest(BaseModel):
    """Check code request."""

    code: str | None = None


class CheckCodeResponse(BaseModel):
    """Check code response.

    ``wildcard`` is only set when the code exists.
    """

    status: bool
    wildcard: bool | None = None


class CheckCodeUseCase(BaseUseCase[CheckCodeRequest, CheckCodeResponse]):
    """Use case for checking whether a code exists.

    Lets a sign-up form tell users early that their code is wrong.
    Never raises for unknown codes.
    """

    def __init__(self, beta_invite_service: BetaInviteService) -> None:
        """Initialize check code use case.

        Args:
            beta_invite_service: Beta invite domain service
        """
        self.beta_invite_service = beta_invite_service

    async def execute(self, request: CheckCodeRequest) -> CheckCodeResponse:
        """Check a code.

        Args:
            request: Check request with code

        Returns:
            Existence and wildcard flag
        """
        check = await self.beta_invite_service.validate_code(request.code or "")
        if not check.found:
            return CheckCodeResponse(status=False)
        return CheckCodeResponse(status=True, wildcard=check.wildcard)
