"""Registration gate domain service."""

import hmac

import logfire

from betagate.domain.error import ForbiddenError


class RegistrationGate:
    """Admits account-creation requests that carry the gating secret.

    The gate never creates accounts; it only decides whether a request may
    reach the registration endpoint.
    """

    def __init__(self, enabled: bool, secret: str, signup_path: str) -> None:
        """Initialize registration gate.

        Args:
            enabled: Whether gating is active
            secret: Shared secret expected in the gating header
            signup_path: Path prefix of the account-creation endpoint
        """
        self.enabled = enabled
        self.secret = secret
        self.signup_path = signup_path

        if self.enabled and not self.secret:
            logfire.warn(
                "Registration gate enabled without a secret; all sign-ups will be denied",
                signup_path=signup_path,
            )

    def guards(self, path: str) -> bool:
        """Check whether a request path is subject to the gate.

        Args:
            path: Request path

        Returns:
            True if the path is the account-creation endpoint or below it
        """
        return path.startswith(self.signup_path)

    def authorize(self, provided_secret: str | None) -> None:
        """Check the gating header of an account-creation request.

        Args:
            provided_secret: Value of the gating header, None if absent

        Raises:
            ForbiddenError: If gating is enabled and the secret does not match
        """
        if not self.enabled:
            return

        # An empty configured secret never matches, not even an empty header
        if not self.secret or not provided_secret:
            logfire.warn(
                "Registration rejected",
                reason="missing secret",
                secret_configured=bool(self.secret),
            )
            raise ForbiddenError()

        if not hmac.compare_digest(
            provided_secret.encode("utf-8"), self.secret.encode("utf-8")
        ):
            logfire.warn("Registration rejected", reason="secret mismatch")
            raise ForbiddenError()
