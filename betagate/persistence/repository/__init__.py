"""PostgreSQL repository implementations."""

from betagate.persistence.repository.beta_invite import PostgresBetaInviteRepository

__all__ = [
    "PostgresBetaInviteRepository",
]
