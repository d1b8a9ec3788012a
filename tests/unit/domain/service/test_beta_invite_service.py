"""Unit tests for BetaInviteService."""

import pytest

from betagate.domain.error import (
    CodeGenerationError,
    DuplicateUserError,
    InvalidCodeError,
    InvalidRequestError,
    UserNotFoundError,
    ValidationError,
)
from betagate.domain.repository import BetaInviteRepository
from betagate.domain.service import (
    BetaInviteService,
    CodeGenerator,
    InviteFieldSchema,
    InviteNotifier,
    RandomCodeGenerator,
)
from betagate.domain.value import AdditionalField, FieldType, InviteCode
from betagate.persistence.repository.inmemory import InMemoryBetaInviteRepository
from betagate.adapter.notification import RecordingInviteNotifier
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class FixedCodeGenerator(CodeGenerator):
    """Hands out predetermined codes in order."""

    def __init__(self, *codes: str) -> None:
        self.codes = list(codes)
        self.emails: list[str | None] = []

    async def generate(self, email: str | None) -> str:
        self.emails.append(email)
        return self.codes.pop(0)


def make_service(
    code_generator: CodeGenerator | None = None,
    notifier: RecordingInviteNotifier | None = None,
    field_schema: InviteFieldSchema | None = None,
) -> BetaInviteService:
    return BetaInviteService(
        beta_invite_repository=InMemoryBetaInviteRepository(),
        code_generator=code_generator or RandomCodeGenerator(),
        invite_notifier=notifier or RecordingInviteNotifier(),
        field_schema=field_schema or InviteFieldSchema(),
        base_url="http://localhost:8000",
        default_redirect="http://localhost:3000",
    )


class TestMintInvite:
    """Tests for mint_invite."""

    @pytest.mark.asyncio
    async def test_mint_without_email_or_wildcard_fails(self, unit_env):
        """Neither email nor wildcard should be rejected."""
        # Arrange
        service = await unit_env.get(BetaInviteService)

        # Act & Assert
        with pytest.raises(InvalidRequestError):
            await service.mint_invite()

        with pytest.raises(InvalidRequestError):
            await service.mint_invite(golden_ticket=True, redirect_to="/x")

    @pytest.mark.asyncio
    async def test_mint_email_invite_saves_and_notifies(self, unit_env):
        """Email invite should be stored and its link delivered."""
        # Arrange
        service = await unit_env.get(BetaInviteService)
        repo = await unit_env.get(BetaInviteRepository)
        notifier = await unit_env.get(InviteNotifier)

        # Act
        invite = await service.mint_invite(
            email="a@x.com", redirect_to="http://localhost:3000/sign-up"
        )

        # Assert
        assert invite.email == "a@x.com"
        assert invite.wildcard is False
        assert invite.golden_ticket is False
        assert len(invite.code.root) == 32
        assert invite.code.root.isalpha()

        saved = await repo.find_by_email("a@x.com")
        assert saved is not None
        assert saved.id == invite.id

        assert len(notifier.sent) == 1
        link = notifier.sent[0]
        assert link.email == "a@x.com"
        assert link.code == invite.code.root
        assert link.url == (
            f"http://localhost:8000/beta/sign-up/{invite.code.root}"
            "?callbackURL=http%3A%2F%2Flocalhost%3A3000%2Fsign-up"
        )

    @pytest.mark.asyncio
    async def test_mint_uses_default_redirect(self):
        """Missing redirect should fall back to the default page."""
        # Arrange
        notifier = RecordingInviteNotifier()
        service = make_service(notifier=notifier)

        # Act
        await service.mint_invite(email="a@x.com")

        # Assert
        assert notifier.sent[0].url.endswith(
            "?callbackURL=http%3A%2F%2Flocalhost%3A3000"
        )

    @pytest.mark.asyncio
    async def test_golden_ticket_skips_notification(self, unit_env):
        """Golden tickets should not send an invite link."""
        # Arrange
        service = await unit_env.get(BetaInviteService)
        notifier = await unit_env.get(InviteNotifier)

        # Act
        invite = await service.mint_invite(email="vip@x.com", golden_ticket=True)

        # Assert
        assert invite.golden_ticket is True
        assert notifier.sent == []

    @pytest.mark.asyncio
    async def test_wildcard_without_email_skips_notification(self, unit_env):
        """Wildcard invites have nobody to notify."""
        # Arrange
        service = await unit_env.get(BetaInviteService)
        notifier = await unit_env.get(InviteNotifier)

        # Act
        invite = await service.mint_invite(wildcard=True)

        # Assert
        assert invite.wildcard is True
        assert invite.email is None
        assert notifier.sent == []

    @pytest.mark.asyncio
    async def test_duplicate_email_fails(self, unit_env):
        """Second invite for the same email should be rejected."""
        # Arrange
        service = await unit_env.get(BetaInviteService)
        await service.mint_invite(email="a@x.com")

        # Act & Assert
        with pytest.raises(DuplicateUserError):
            await service.mint_invite(email="a@x.com")

        with pytest.raises(DuplicateUserError):
            await service.mint_invite(email="a@x.com", wildcard=True)

    @pytest.mark.asyncio
    async def test_generator_receives_email(self):
        """Code generator should see the target email."""
        # Arrange
        generator = FixedCodeGenerator("FirstCode", "SecondCode")
        service = make_service(code_generator=generator)

        # Act
        first = await service.mint_invite(email="a@x.com")
        second = await service.mint_invite(wildcard=True)

        # Assert
        assert generator.emails == ["a@x.com", None]
        assert first.code == InviteCode("FirstCode")
        assert second.code == InviteCode("SecondCode")

    @pytest.mark.asyncio
    async def test_unusable_generated_code_raises_domain_error(self):
        """An empty or oversized generated code should not reach storage."""
        # Arrange
        generator = FixedCodeGenerator("", "x" * 300)
        service = make_service(code_generator=generator)

        # Act & Assert
        with pytest.raises(CodeGenerationError):
            await service.mint_invite(email="a@x.com")

        with pytest.raises(CodeGenerationError):
            await service.mint_invite(wildcard=True)

        assert await service.beta_invite_repository.find_by_email("a@x.com") is None

    @pytest.mark.asyncio
    async def test_delivery_failure_keeps_invite(self):
        """A failed delivery should not undo the invite."""
        # Arrange
        service = make_service(notifier=RecordingInviteNotifier(fail=True))

        # Act
        invite = await service.mint_invite(email="a@x.com")

        # Assert
        assert await service.beta_invite_repository.find_by_email("a@x.com") == invite

    @pytest.mark.asyncio
    async def test_extra_fields_validated_and_stored(self):
        """Declared extra fields should be coerced; undeclared ones dropped."""
        # Arrange
        schema = InviteFieldSchema(
            {
                "company": AdditionalField(type=FieldType.STRING, required=True),
                "seats": AdditionalField(type=FieldType.NUMBER),
            }
        )
        service = make_service(field_schema=schema)

        # Act
        invite = await service.mint_invite(
            email="a@x.com",
            extra={"company": "Acme", "seats": "3", "unknown": "dropped"},
        )

        # Assert
        assert invite.extra == {"company": "Acme", "seats": 3.0}

    @pytest.mark.asyncio
    async def test_missing_required_extra_field_fails(self):
        """A required extra field must be present."""
        # Arrange
        schema = InviteFieldSchema(
            {"company": AdditionalField(type=FieldType.STRING, required=True)}
        )
        service = make_service(field_schema=schema)

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.mint_invite(email="a@x.com")


class TestRevokeInvite:
    """Tests for revoke_invite."""

    @pytest.mark.asyncio
    async def test_revoke_deletes_invite(self, unit_env):
        """Revoking should remove the invite."""
        # Arrange
        service = await unit_env.get(BetaInviteService)
        repo = await unit_env.get(BetaInviteRepository)
        invite = await service.mint_invite(email="a@x.com")

        # Act
        await service.revoke_invite("a@x.com")

        # Assert
        assert await repo.find_by_email("a@x.com") is None
        assert await repo.find_by_code(invite.code) is None

    @pytest.mark.asyncio
    async def test_revoke_unknown_email_fails(self, unit_env):
        """Revoking an unknown email should fail."""
        # Arrange
        service = await unit_env.get(BetaInviteService)

        # Act & Assert
        with pytest.raises(UserNotFoundError):
            await service.revoke_invite("nobody@x.com")

    @pytest.mark.asyncio
    async def test_email_can_be_invited_again_after_revoke(self, unit_env):
        """Revocation frees the email for a new invite."""
        # Arrange
        service = await unit_env.get(BetaInviteService)
        await service.mint_invite(email="a@x.com")
        await service.revoke_invite("a@x.com")

        # Act
        invite = await service.mint_invite(email="a@x.com")

        # Assert
        assert invite.email == "a@x.com"


class TestValidateCode:
    """Tests for validate_code."""

    @pytest.mark.asyncio
    async def test_known_codes_report_wildcard_flag(self, unit_env):
        """Minted codes should be found with the right wildcard flag."""
        # Arrange
        service = await unit_env.get(BetaInviteService)
        bound = await service.mint_invite(email="a@x.com")
        wildcard = await service.mint_invite(wildcard=True)

        # Act
        bound_check = await service.validate_code(bound.code.root)
        wildcard_check = await service.validate_code(wildcard.code.root)

        # Assert
        assert bound_check.found is True
        assert bound_check.wildcard is False
        assert wildcard_check.found is True
        assert wildcard_check.wildcard is True

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["neverMinted", "", "x" * 300])
    async def test_unknown_code_not_found(self, unit_env, code):
        """Unknown, empty or oversized codes are simply not found."""
        # Arrange
        service = await unit_env.get(BetaInviteService)

        # Act
        check = await service.validate_code(code)

        # Assert
        assert check.found is False

    @pytest.mark.asyncio
    async def test_validate_does_not_consume(self, unit_env):
        """Lookups never remove wildcard codes."""
        # Arrange
        service = await unit_env.get(BetaInviteService)
        wildcard = await service.mint_invite(wildcard=True)

        # Act
        await service.validate_code(wildcard.code.root)
        check = await service.validate_code(wildcard.code.root)

        # Assert
        assert check.found is True


class TestRedeemCode:
    """Tests for redeem_code."""

    @pytest.mark.asyncio
    async def test_email_bound_code_is_not_deleted(self, unit_env):
        """Email-bound codes stay redeemable after use."""
        # Arrange
        service = await unit_env.get(BetaInviteService)
        invite = await service.mint_invite(email="a@x.com")

        # Act
        first = await service.redeem_code("a@x.com", invite.code.root)
        second = await service.redeem_code("a@x.com", invite.code.root)

        # Assert
        assert first.id == invite.id
        assert second.id == invite.id
        assert (await service.validate_code(invite.code.root)).found is True

    @pytest.mark.asyncio
    async def test_email_bound_code_rejects_other_email(self, unit_env):
        """An email-bound code cannot be used by someone else."""
        # Arrange
        service = await unit_env.get(BetaInviteService)
        invite = await service.mint_invite(email="a@x.com")

        # Act & Assert
        with pytest.raises(InvalidCodeError):
            await service.redeem_code("b@x.com", invite.code.root)

    @pytest.mark.asyncio
    async def test_wildcard_consumed_once(self, unit_env):
        """A wildcard code works once for anyone, then it is gone."""
        # Arrange
        service = await unit_env.get(BetaInviteService)
        repo = await unit_env.get(BetaInviteRepository)
        wildcard = await service.mint_invite(wildcard=True)

        # Act
        redeemed = await service.redeem_code("anyone@x.com", wildcard.code.root)

        # Assert
        assert redeemed.id == wildcard.id
        assert redeemed.wildcard is True
        assert await repo.find_by_code(wildcard.code) is None

        with pytest.raises(InvalidCodeError):
            await service.redeem_code("other@x.com", wildcard.code.root)

    @pytest.mark.asyncio
    async def test_email_match_wins_over_wildcard(self, unit_env):
        """Email-bound redemption never touches wildcard invites."""
        # Arrange
        service = await unit_env.get(BetaInviteService)
        repo = await unit_env.get(BetaInviteRepository)
        bound = await service.mint_invite(email="a@x.com")
        wildcard = await service.mint_invite(wildcard=True)

        # Act
        redeemed = await service.redeem_code("a@x.com", bound.code.root)

        # Assert
        assert redeemed.id == bound.id
        assert await repo.find_by_code(wildcard.code) is not None

    @pytest.mark.asyncio
    async def test_wildcard_with_email_redeemed_by_owner_is_consumed(self, unit_env):
        """An email-bound wildcard matched by its owner is still consumed."""
        # Arrange
        service = await unit_env.get(BetaInviteService)
        repo = await unit_env.get(BetaInviteRepository)
        invite = await service.mint_invite(email="a@x.com", wildcard=True)

        # Act
        await service.redeem_code("a@x.com", invite.code.root)

        # Assert
        assert await repo.find_by_code(invite.code) is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", ["unknownCode", ""])
    async def test_unknown_code_fails(self, unit_env, code):
        """Codes that match nothing are rejected."""
        # Arrange
        service = await unit_env.get(BetaInviteService)

        # Act & Assert
        with pytest.raises(InvalidCodeError):
            await service.redeem_code("a@x.com", code)
