"""Repository interfaces for beta access.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from betagate.domain.repository.beta_invite import BetaInviteRepository

__all__ = [
    "BetaInviteRepository",
]
