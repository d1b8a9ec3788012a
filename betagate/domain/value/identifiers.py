"""Strongly typed identifiers for beta access entities."""

from typing import NewType
from uuid import UUID

BetaInviteId = NewType("BetaInviteId", UUID)
