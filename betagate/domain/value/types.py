"""Domain value objects for beta access.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum
from typing import Any

from pydantic import field_validator

from betagate.domain.value.common import RootValueObject, ValueObject


class InviteCode(RootValueObject[str]):
    """Redemption token handed to an invitee."""

    @field_validator("root")
    @classmethod
    def validate_code_format(cls, v: str) -> str:
        """Validate code is not empty."""
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Code must be 1-255 characters")
        return v

    def masked(self) -> str:
        """Code prefix safe for logs."""
        return self.root[:8] + "..."


class FieldType(str, Enum):
    """Types an additional invite field may declare."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    STRING_ARRAY = "string[]"
    NUMBER_ARRAY = "number[]"


class AdditionalField(ValueObject):
    """Caller-declared extension of the invite record."""

    type: FieldType
    required: bool = False


class InviteLink(ValueObject):
    """Payload handed to the invite notifier."""

    email: str
    url: str
    code: str


class CodeCheck(ValueObject):
    """Result of a side-effect free code lookup."""

    found: bool
    wildcard: bool = False


class RegistrationPayload(ValueObject):
    """Account details forwarded to the registration endpoint."""

    name: str
    username: str
    email: str
    password: str
    is_early_access: bool = True

    def to_body(self) -> dict[str, Any]:
        """JSON body expected by the registration endpoint."""
        return {
            "name": self.name,
            "username": self.username,
            "email": self.email,
            "password": self.password,
            "isEarlyAccess": self.is_early_access,
        }


class RegistrationResult(ValueObject):
    """Registration endpoint response, kept as received."""

    status_code: int
    body: Any = None
