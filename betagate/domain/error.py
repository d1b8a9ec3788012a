"""Domain layer errors."""

from typing import ClassVar


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class CodeGenerationError(DomainError):
    """Code generator produced something that is not a usable invite code."""

    pass


class BetaAccessError(DomainError):
    """Rejection surfaced to the caller.

    Each subclass carries a stable machine-readable kind.
    """

    kind: ClassVar[str] = "BETA_ACCESS_DENIED"
    default_message: ClassVar[str] = "Beta access denied"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidRequestError(BetaAccessError):
    """Raised when neither email nor wildcard is given for a new invite."""

    kind = "INVALID_REQUEST"
    default_message = "Either email or wildcard must be provided"


class DuplicateUserError(BetaAccessError):
    """Raised when the email already holds an invite."""

    kind = "USER_EXISTS"
    default_message = "User already exists in the beta"


class UserNotFoundError(BetaAccessError):
    """Raised when no invite exists for the email."""

    kind = "USER_NOT_FOUND"
    default_message = "User does not have beta access"


class InvalidCodeError(BetaAccessError):
    """Raised when a code is missing, unknown or does not match the email."""

    kind = "INVALID_CODE"
    default_message = "Invalid or expired beta code"


class ForbiddenError(BetaAccessError):
    """Raised when the gating secret is missing or wrong."""

    kind = "FORBIDDEN"
    default_message = "Beta access required"


class InvalidTokenError(BetaAccessError):
    """Raised in the browser flow when code or callback cannot be resolved."""

    kind = "INVALID_TOKEN"
    default_message = "Invalid or missing beta token"
