"""Confirm sign up use case (browser invite link)."""

import logfire
from pydantic import BaseModel

from betagate.application.usecase.base import BaseUseCase
from betagate.config import Settings
from betagate.domain.error import InvalidTokenError
from betagate.domain.service import BetaInviteService, OriginPolicy
from betagate.util.url import redirect_callback, redirect_error

INVALID_CALLBACK_URL = "INVALID_CALLBACK_URL"


class ConfirmSignUpRequest(BaseModel):
    """Confirm sign up request."""

    code: str | None = None
    callback_url: str | None = None


class ConfirmSignUpResponse(BaseModel):
    """Where to send the browser."""

    redirect_url: str
    error: str | None = None


class ConfirmSignUpUseCase(
    BaseUseCase[ConfirmSignUpRequest, ConfirmSignUpResponse]
):
    """Use case for the link clicked in an invite email.

    Checks that the code exists and sends the browser to the callback page
    with the code attached, so the sign-up form can submit it. Never
    consumes the code. Every outcome is a redirect.
    """

    def __init__(
        self,
        beta_invite_service: BetaInviteService,
        origin_policy: OriginPolicy,
        settings: Settings,
    ) -> None:
        """Initialize use case.

        Args:
            beta_invite_service: Beta invite domain service
            origin_policy: Redirect target validation
            settings: Application settings
        """
        self.beta_invite_service = beta_invite_service
        self.origin_policy = origin_policy
        self.settings = settings

    async def execute(self, request: ConfirmSignUpRequest) -> ConfirmSignUpResponse:
        """Resolve the redirect for an invite link.

        Args:
            request: Code and callback URL from the link

        Returns:
            Redirect target, with ``error`` set on failure
        """
        base_url = self.settings.api.base_url
        error_path = self.settings.beta.error_path

        with logfire.span("confirm_sign_up", callback_url=request.callback_url):
            if request.callback_url and not self.origin_policy.is_allowed(
                request.callback_url
            ):
                logfire.warn(
                    "Untrusted callback URL", callback_url=request.callback_url
                )
                return ConfirmSignUpResponse(
                    redirect_url=redirect_error(
                        base_url, None, INVALID_CALLBACK_URL, error_path
                    ),
                    error=INVALID_CALLBACK_URL,
                )

            if not request.code or not request.callback_url:
                return self._invalid_token(request.callback_url)

            check = await self.beta_invite_service.validate_code(request.code)
            if not check.found:
                return self._invalid_token(request.callback_url)

            logfire.info("Invite link confirmed", wildcard=check.wildcard)
            return ConfirmSignUpResponse(
                redirect_url=redirect_callback(
                    base_url, request.callback_url, {"code": request.code}
                )
            )

    def _invalid_token(self, callback_url: str | None) -> ConfirmSignUpResponse:
        logfire.warn("Invalid invite link", callback_url=callback_url)
        return ConfirmSignUpResponse(
            redirect_url=redirect_error(
                self.settings.api.base_url,
                callback_url,
                InvalidTokenError.kind,
                self.settings.beta.error_path,
            ),
            error=InvalidTokenError.kind,
        )
