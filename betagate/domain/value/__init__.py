"""Domain value objects for beta access."""

from betagate.domain.value.identifiers import BetaInviteId
from betagate.domain.value.types import (
    AdditionalField,
    CodeCheck,
    FieldType,
    InviteCode,
    InviteLink,
    RegistrationPayload,
    RegistrationResult,
)

__all__ = [
    # Identifiers
    "BetaInviteId",
    # Types
    "AdditionalField",
    "CodeCheck",
    "FieldType",
    "InviteCode",
    "InviteLink",
    "RegistrationPayload",
    "RegistrationResult",
]
