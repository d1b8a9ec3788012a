"""Application layer DI providers."""

from dishka import Scope, provide

from betagate.application.usecase.beta import (
    AddBetaUserUseCase,
    CheckCodeUseCase,
    ConfirmSignUpUseCase,
    RemoveBetaUserUseCase,
    SignUpBetaUserUseCase,
)
from betagate.config import BetaSettings, Settings
from betagate.domain.service import (
    BetaInviteService,
    OriginPolicy,
    RegistrationClient,
)
from betagate.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_add_beta_user_use_case(
        self, beta_invite_service: BetaInviteService
    ) -> AddBetaUserUseCase:
        """Provide add beta user use case."""
        return AddBetaUserUseCase(beta_invite_service=beta_invite_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_beta_user_use_case(
        self, beta_invite_service: BetaInviteService
    ) -> RemoveBetaUserUseCase:
        """Provide remove beta user use case."""
        return RemoveBetaUserUseCase(beta_invite_service=beta_invite_service)

    @provide(scope=Scope.REQUEST)
    def get_check_code_use_case(
        self, beta_invite_service: BetaInviteService
    ) -> CheckCodeUseCase:
        """Provide check code use case."""
        return CheckCodeUseCase(beta_invite_service=beta_invite_service)

    @provide(scope=Scope.REQUEST)
    def get_sign_up_beta_user_use_case(
        self,
        beta_invite_service: BetaInviteService,
        registration_client: RegistrationClient,
        beta_settings: BetaSettings,
    ) -> SignUpBetaUserUseCase:
        """Provide sign up use case."""
        return SignUpBetaUserUseCase(
            beta_invite_service=beta_invite_service,
            registration_client=registration_client,
            beta_settings=beta_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_confirm_sign_up_use_case(
        self,
        beta_invite_service: BetaInviteService,
        origin_policy: OriginPolicy,
        settings: Settings,
    ) -> ConfirmSignUpUseCase:
        """Provide confirm sign up use case."""
        return ConfirmSignUpUseCase(
            beta_invite_service=beta_invite_service,
            origin_policy=origin_policy,
            settings=settings,
        )
