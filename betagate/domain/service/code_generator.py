"""Invite code generation strategies."""

import secrets
import string
from abc import ABC, abstractmethod


class CodeGenerator(ABC):
    """Produces new invite codes.

    Embedding applications can provide their own implementation through DI.
    """

    @abstractmethod
    async def generate(self, email: str | None) -> str:
        """Generate a code for a new invite.

        Args:
            email: Email the invite is bound to, None for wildcard invites

        Returns:
            A fresh invite code
        """
        pass


class RandomCodeGenerator(CodeGenerator):
    """Secure random code made of Latin letters only.

    Digits and symbols are left out so codes stay unambiguous inside links.
    """

    ALPHABET = string.ascii_lowercase + string.ascii_uppercase

    def __init__(self, length: int = 32) -> None:
        """Initialize generator.

        Args:
            length: Number of characters per code
        """
        if length < 1:
            raise ValueError("Code length must be positive")
        self.length = length

    async def generate(self, email: str | None) -> str:
        """Generate a random code; the email is not used."""
        return "".join(secrets.choice(self.ALPHABET) for _ in range(self.length))
