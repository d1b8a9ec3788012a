"""Beta invite entity.

A beta invite grants access to account registration. It is either bound to
one email address or a wildcard that any registrant can redeem once.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from betagate.domain.value import BetaInviteId, InviteCode


class BetaInvite(BaseModel):
    """Beta invite entity.

    Business rules:
    - At most one invite per email address
    - Codes are unique across all invites
    - Invites never expire and are never updated
    - Wildcard invites are deleted when redeemed; email-bound invites are kept
    """

    model_config = ConfigDict(frozen=True)

    id: BetaInviteId
    email: Optional[str] = None  # Absent for pure wildcard invites
    code: InviteCode
    wildcard: bool = False
    golden_ticket: bool = False  # Code handed out manually, no invite email
    added_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    extra: dict[str, Any] = Field(default_factory=dict)  # Configured additional fields
