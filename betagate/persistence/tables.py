"""SQLAlchemy table definitions for beta access.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations; additional
columns come from the configured invite fields.
"""

from collections.abc import Mapping

from sqlalchemy import Boolean, Column, Float, MetaData, String, Table, Text, text
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID
from sqlalchemy.types import TypeEngine

from betagate.domain.value import AdditionalField, FieldType

# Metadata object for all tables
metadata = MetaData()

BASE_COLUMNS = frozenset(
    {"id", "email", "code", "golden_ticket", "wildcard", "added_at"}
)

COLUMN_TYPES: dict[FieldType, TypeEngine] = {
    FieldType.STRING: Text(),
    FieldType.NUMBER: Float(),
    FieldType.BOOLEAN: Boolean(),
    FieldType.DATE: TIMESTAMP(timezone=True),
    FieldType.STRING_ARRAY: ARRAY(Text),
    FieldType.NUMBER_ARRAY: ARRAY(Float),
}


def create_beta_table(
    target: MetaData,
    name: str = "beta",
    additional_fields: Mapping[str, AdditionalField] | None = None,
) -> Table:
    """Build the beta invite table.

    Args:
        target: Metadata to register the table on
        name: Table name
        additional_fields: Extra columns keyed by field name

    Returns:
        The table definition
    """
    extra_columns = [
        Column(field_name, COLUMN_TYPES[field.type], nullable=not field.required)
        for field_name, field in (additional_fields or {}).items()
    ]
    return Table(
        name,
        target,
        Column("id", UUID(as_uuid=True), primary_key=True),
        Column("email", String(255), nullable=True, unique=True),
        Column("code", String(255), nullable=False, unique=True),  # Redemption token
        Column(
            "golden_ticket", Boolean, nullable=False, server_default=text("false")
        ),
        Column("wildcard", Boolean, nullable=False, server_default=text("false")),
        Column(
            "added_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default=text("NOW()"),
        ),
        *extra_columns,
    )


# ============================================================================
# BETA TABLE (default shape, used by migrations)
# ============================================================================
beta_table = create_beta_table(metadata)
