"""Domain layer DI providers."""

from dishka import Scope, provide

from betagate.config import BetaSettings, Settings
from betagate.domain.repository import BetaInviteRepository
from betagate.domain.service import (
    BetaInviteService,
    CodeGenerator,
    InviteFieldSchema,
    InviteNotifier,
    OriginPolicy,
    RandomCodeGenerator,
    RegistrationGate,
    TrustedOriginPolicy,
)
from betagate.domain.value import AdditionalField, FieldType
from betagate.util.di.base import ProviderBase
from betagate.util.error import ConfigurationError


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Stateless strategies are APP-scoped. The invite service is REQUEST-scoped
    to align with the repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_code_generator(self, beta_settings: BetaSettings) -> CodeGenerator:
        """Provide the default secure-random code generator."""
        return RandomCodeGenerator(length=beta_settings.code_length)

    @provide(scope=Scope.APP)
    def get_field_schema(self, beta_settings: BetaSettings) -> InviteFieldSchema:
        """Provide the additional field schema.

        Raises:
            ConfigurationError: If a field name is reserved
        """
        fields = {
            name: AdditionalField(type=FieldType(field.type), required=field.required)
            for name, field in beta_settings.additional_fields.items()
        }
        try:
            return InviteFieldSchema(fields)
        except ValueError as e:
            raise ConfigurationError(
                str(e), setting="beta.additional_fields"
            ) from e

    @provide(scope=Scope.APP)
    def get_origin_policy(self, settings: Settings) -> OriginPolicy:
        """Provide redirect origin policy."""
        return TrustedOriginPolicy(
            base_url=settings.api.base_url,
            trusted_origins=[settings.api.frontend_url, *settings.beta.trusted_origins],
        )

    @provide(scope=Scope.APP)
    def get_registration_gate(self, beta_settings: BetaSettings) -> RegistrationGate:
        """Provide registration gate."""
        return RegistrationGate(
            enabled=beta_settings.enabled,
            secret=beta_settings.secret,
            signup_path=beta_settings.signup_path,
        )

    @provide
    def get_beta_invite_service(
        self,
        beta_invite_repository: BetaInviteRepository,
        code_generator: CodeGenerator,
        invite_notifier: InviteNotifier,
        field_schema: InviteFieldSchema,
        settings: Settings,
    ) -> BetaInviteService:
        """Provide beta invite domain service."""
        return BetaInviteService(
            beta_invite_repository=beta_invite_repository,
            code_generator=code_generator,
            invite_notifier=invite_notifier,
            field_schema=field_schema,
            base_url=settings.api.base_url,
            default_redirect=settings.beta.default_redirect or settings.api.frontend_url,
        )
