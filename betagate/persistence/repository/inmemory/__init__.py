"""In-memory repository implementations for testing."""

from .beta_invite import InMemoryBetaInviteRepository

__all__ = [
    "InMemoryBetaInviteRepository",
]
