"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class RegistrationError(AdapterError):
    """Registration endpoint could not be reached."""

    pass


class NotificationError(AdapterError):
    """Invite link delivery failed."""

    pass
