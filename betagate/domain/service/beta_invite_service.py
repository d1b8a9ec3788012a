"""Beta invite domain service."""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

import logfire
import pydantic

from betagate.domain.error import (
    CodeGenerationError,
    DuplicateUserError,
    InvalidCodeError,
    InvalidRequestError,
    UserNotFoundError,
)
from betagate.domain.model.beta_invite import BetaInvite
from betagate.domain.repository import BetaInviteRepository
from betagate.domain.value import BetaInviteId, CodeCheck, InviteCode, InviteLink
from betagate.util.url import build_invite_url

from .code_generator import CodeGenerator
from .field_schema import InviteFieldSchema
from .invite_notifier import InviteNotifier


class BetaInviteService:
    """Domain service for the invite code lifecycle.

    Uniqueness of emails and codes, and the atomic consumption of wildcard
    codes, are enforced by the repository.
    """

    def __init__(
        self,
        beta_invite_repository: BetaInviteRepository,
        code_generator: CodeGenerator,
        invite_notifier: InviteNotifier,
        field_schema: InviteFieldSchema,
        base_url: str,
        default_redirect: str,
    ) -> None:
        """Initialize beta invite service.

        Args:
            beta_invite_repository: Beta invite repository
            code_generator: Strategy producing new codes
            invite_notifier: Strategy delivering invite links
            field_schema: Additional field declarations
            base_url: API base URL used in invite links
            default_redirect: Callback URL used when a mint call names none
        """
        self.beta_invite_repository = beta_invite_repository
        self.code_generator = code_generator
        self.invite_notifier = invite_notifier
        self.field_schema = field_schema
        self.base_url = base_url
        self.default_redirect = default_redirect

    async def mint_invite(
        self,
        email: str | None = None,
        wildcard: bool = False,
        golden_ticket: bool = False,
        redirect_to: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> BetaInvite:
        """Create a new invite.

        Sends the invite link for email-bound invites unless the invite is a
        golden ticket. A failed delivery is logged and does not undo the invite.

        Args:
            email: Email to bind the invite to
            wildcard: Whether any registrant may redeem the code once
            golden_ticket: Suppress invite link delivery
            redirect_to: Page the invite link should land on
            extra: Values for configured additional fields

        Returns:
            Created invite

        Raises:
            InvalidRequestError: If neither email nor wildcard is given
            DuplicateUserError: If the email already holds an invite
            ValidationError: If extra values do not match the declared fields
            CodeGenerationError: If the code generator returns an unusable code
        """
        with logfire.span(
            "beta_invite_service.mint_invite",
            email=email,
            wildcard=wildcard,
            golden_ticket=golden_ticket,
        ):
            if not email and not wildcard:
                logfire.warn("Invite rejected: no email and not wildcard")
                raise InvalidRequestError()

            extra_values = self.field_schema.validate(extra or {})

            if email:
                existing = await self.beta_invite_repository.find_by_email(email)
                if existing:
                    logfire.warn("Invite already exists", email=email)
                    raise DuplicateUserError()

            raw_code = await self.code_generator.generate(email)
            try:
                code = InviteCode(raw_code)
            except pydantic.ValidationError as e:
                logfire.error("Code generator returned an invalid code")
                raise CodeGenerationError(
                    "Code generator returned an invalid code"
                ) from e

            invite = BetaInvite(
                id=BetaInviteId(uuid4()),
                email=email or None,
                code=code,
                wildcard=wildcard,
                golden_ticket=golden_ticket,
                added_at=datetime.now(timezone.utc),
                extra=extra_values,
            )

            saved = await self.beta_invite_repository.save(invite)
            logfire.info(
                "Invite created",
                invite_id=str(saved.id),
                email=email,
                wildcard=wildcard,
                code=code.masked(),
            )

            if email and not golden_ticket:
                await self._deliver_invite_link(
                    InviteLink(
                        email=email,
                        url=build_invite_url(
                            self.base_url,
                            code.root,
                            redirect_to or self.default_redirect,
                        ),
                        code=code.root,
                    )
                )

            return saved

    async def revoke_invite(self, email: str) -> None:
        """Remove the invite bound to an email.

        Args:
            email: Invitee email

        Raises:
            UserNotFoundError: If no invite exists for the email
        """
        with logfire.span("beta_invite_service.revoke_invite", email=email):
            existing = await self.beta_invite_repository.find_by_email(email)
            if not existing:
                logfire.warn("Invite not found for revocation", email=email)
                raise UserNotFoundError()

            deleted = await self.beta_invite_repository.delete_by_email(email)
            if not deleted:
                # Removed concurrently between lookup and delete
                raise UserNotFoundError()

            logfire.info("Invite revoked", invite_id=str(existing.id), email=email)

    async def validate_code(self, code: str) -> CodeCheck:
        """Look up a code without consuming it.

        Args:
            code: Code to look up

        Returns:
            Whether the code exists and whether it is a wildcard
        """
        invite_code = _parse_code(code)
        if invite_code is None:
            return CodeCheck(found=False)

        with logfire.span(
            "beta_invite_service.validate_code", code=invite_code.masked()
        ):
            invite = await self.beta_invite_repository.find_by_code(invite_code)
            if not invite:
                logfire.info("Code not found", code=invite_code.masked())
                return CodeCheck(found=False)

            logfire.info(
                "Code found", code=invite_code.masked(), wildcard=invite.wildcard
            )
            return CodeCheck(found=True, wildcard=invite.wildcard)

    async def redeem_code(self, email: str, code: str) -> BetaInvite:
        """Redeem a code for an email.

        An invite bound to the email wins over a wildcard invite. Wildcard
        invites are consumed; email-bound invites stay in place, so the same
        email and code pair can be redeemed again.

        Args:
            email: Registrant email
            code: Presented code

        Returns:
            The matched invite as it was before consumption

        Raises:
            InvalidCodeError: If no invite matches
        """
        invite_code = _parse_code(code)
        if invite_code is None:
            raise InvalidCodeError()

        with logfire.span(
            "beta_invite_service.redeem_code",
            email=email,
            code=invite_code.masked(),
        ):
            invite = await self.beta_invite_repository.find_by_email_and_code(
                email, invite_code
            )
            if invite is None:
                invite = await self.beta_invite_repository.find_wildcard_by_code(
                    invite_code
                )

            if invite is None:
                logfire.warn(
                    "Invalid beta code", email=email, code=invite_code.masked()
                )
                raise InvalidCodeError()

            if invite.wildcard:
                consumed = await self.beta_invite_repository.consume_wildcard(
                    invite_code
                )
                if consumed is None:
                    # Another redemption consumed it first
                    logfire.warn(
                        "Wildcard code already consumed", code=invite_code.masked()
                    )
                    raise InvalidCodeError()
                logfire.info(
                    "Wildcard code consumed",
                    invite_id=str(invite.id),
                    email=email,
                )
            else:
                logfire.info(
                    "Email-bound code redeemed",
                    invite_id=str(invite.id),
                    email=email,
                )

            return invite

    async def _deliver_invite_link(self, link: InviteLink) -> None:
        """Hand the invite link to the notifier without failing the mint."""
        try:
            await self.invite_notifier.send_invite_link(link)
            logfire.info("Invite link sent", email=link.email)
        except Exception as e:
            logfire.error(
                "Invite link delivery failed",
                email=link.email,
                error=str(e),
                error_type=type(e).__name__,
            )


def _parse_code(code: str | None) -> InviteCode | None:
    """Wrap a presented code, None when it cannot be a valid code."""
    if not code:
        return None
    try:
        return InviteCode(code)
    except pydantic.ValidationError:
        return None
