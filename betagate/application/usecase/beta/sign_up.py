"""Sign up beta user use case."""

import logfire
from pydantic import BaseModel

from betagate.application.usecase.base import BaseUseCase
from betagate.config import BetaSettings
from betagate.domain.error import InvalidCodeError
from betagate.domain.service import BetaInviteService, RegistrationClient
from betagate.domain.value import RegistrationPayload, RegistrationResult


class SignUpBetaUserRequest(BaseModel):
    """Sign up request."""

    name: str
    username: str
    email: str
    password: str
    code: str | None = None


class SignUpBetaUserUseCase(
    BaseUseCase[SignUpBetaUserRequest, RegistrationResult]
):
    """Use case for redeeming a code and creating the account.

    Flow:
    1. Reject requests without a code
    2. Redeem the code for the email (wildcard codes are consumed)
    3. Forward the account details to the registration endpoint with the
       gating secret attached
    4. Hand back the registration response unchanged
    """

    def __init__(
        self,
        beta_invite_service: BetaInviteService,
        registration_client: RegistrationClient,
        beta_settings: BetaSettings,
    ) -> None:
        """Initialize use case.

        Args:
            beta_invite_service: Beta invite domain service
            registration_client: Client for the registration endpoint
            beta_settings: Beta settings with the gating secret
        """
        self.beta_invite_service = beta_invite_service
        self.registration_client = registration_client
        self.beta_settings = beta_settings

    async def execute(self, request: SignUpBetaUserRequest) -> RegistrationResult:
        """Execute sign up.

        Args:
            request: Sign up request

        Returns:
            The registration endpoint's response

        Raises:
            InvalidCodeError: If the code is missing or does not match
            RegistrationError: If the registration endpoint is unreachable
        """
        with logfire.span("sign_up_beta_user", email=request.email):
            if not request.code:
                logfire.warn("Sign up without beta code", email=request.email)
                raise InvalidCodeError()

            invite = await self.beta_invite_service.redeem_code(
                request.email, request.code
            )

            payload = RegistrationPayload(
                name=request.name,
                username=request.username,
                email=request.email,
                password=request.password,
                is_early_access=True,
            )
            result = await self.registration_client.register(
                payload,
                headers={self.beta_settings.header_name: self.beta_settings.secret},
            )

            logfire.info(
                "Beta sign up forwarded",
                email=request.email,
                invite_id=str(invite.id),
                wildcard=invite.wildcard,
                status_code=result.status_code,
            )
            return result
