"""Validation of caller-declared additional invite fields."""

from datetime import datetime
from typing import Any, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, create_model

from betagate.domain.error import ValidationError
from betagate.domain.value import AdditionalField, FieldType

FIELD_TYPES: dict[FieldType, Any] = {
    FieldType.STRING: str,
    FieldType.NUMBER: float,
    FieldType.BOOLEAN: bool,
    FieldType.DATE: datetime,
    FieldType.STRING_ARRAY: list[str],
    FieldType.NUMBER_ARRAY: list[float],
}

# Names owned by the base invite record or the mint request
RESERVED_FIELDS = frozenset(
    {
        "id",
        "email",
        "code",
        "wildcard",
        "golden_ticket",
        "goldenTicket",
        "added_at",
        "addedAt",
        "redirect_to",
        "redirectTo",
        "extra",
    }
)


class InviteFieldSchema:
    """Typed extension map attached to every invite.

    Undeclared keys are dropped; declared keys are coerced to their type.
    """

    def __init__(self, fields: dict[str, AdditionalField] | None = None) -> None:
        """Initialize schema.

        Args:
            fields: Additional field declarations keyed by field name

        Raises:
            ValueError: If a field name collides with a base record field
        """
        self.fields = dict(fields or {})

        clashes = RESERVED_FIELDS.intersection(self.fields)
        if clashes:
            raise ValueError(
                f"Additional fields clash with invite fields: {sorted(clashes)}"
            )

        definitions: dict[str, Any] = {}
        for name, field in self.fields.items():
            python_type = FIELD_TYPES[field.type]
            if field.required:
                definitions[name] = (python_type, ...)
            else:
                definitions[name] = (Optional[python_type], None)

        self._model: type[BaseModel] = create_model(
            "BetaInviteExtra",
            __config__=ConfigDict(extra="ignore"),
            **definitions,
        )

    @property
    def names(self) -> list[str]:
        """Declared field names."""
        return list(self.fields)

    def validate(self, values: dict[str, Any]) -> dict[str, Any]:
        """Validate extra values against the declared fields.

        Args:
            values: Raw extra values from the request

        Returns:
            Values of declared fields that were provided, coerced to their types

        Raises:
            ValidationError: If a required field is missing or a value has the wrong type
        """
        try:
            parsed = self._model.model_validate(values)
        except pydantic.ValidationError as e:
            raise ValidationError(str(e)) from e
        return parsed.model_dump(exclude_unset=True)
