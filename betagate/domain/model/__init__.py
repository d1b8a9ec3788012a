"""Domain model entities for beta access."""

from betagate.domain.model.beta_invite import BetaInvite

__all__ = [
    "BetaInvite",
]
