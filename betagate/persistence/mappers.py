"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Mapping
from uuid import UUID

from betagate.domain.model import BetaInvite
from betagate.domain.value import BetaInviteId, InviteCode
from betagate.persistence.tables import BASE_COLUMNS


def row_to_beta_invite(row: Mapping[str, Any]) -> BetaInvite:
    """Convert database row to BetaInvite domain model.

    Columns beyond the base record are collected into ``extra``;
    NULL extras are left out.

    Args:
        row: Database row as mapping

    Returns:
        BetaInvite domain model
    """
    return BetaInvite(
        id=BetaInviteId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        email=row.get("email"),
        code=InviteCode(root=row["code"]),
        wildcard=bool(row.get("wildcard")),
        golden_ticket=bool(row.get("golden_ticket")),
        added_at=row["added_at"],
        extra={
            key: value
            for key, value in row.items()
            if key not in BASE_COLUMNS and value is not None
        },
    )


def beta_invite_to_dict(invite: BetaInvite) -> Dict[str, Any]:
    """Convert BetaInvite domain model to database dict.

    Args:
        invite: BetaInvite domain model

    Returns:
        Dict suitable for database insertion, extras flattened into columns
    """
    return {
        "id": invite.id,
        "email": invite.email,
        "code": invite.code.root,
        "golden_ticket": invite.golden_ticket,
        "wildcard": invite.wildcard,
        "added_at": invite.added_at,
        **invite.extra,
    }
