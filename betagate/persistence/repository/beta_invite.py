"""PostgreSQL implementation of BetaInvite repository."""

from typing import Optional

from sqlalchemy import Table, and_, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from betagate.domain.model import BetaInvite
from betagate.domain.repository import BetaInviteRepository
from betagate.domain.value import InviteCode
from betagate.persistence.mappers import beta_invite_to_dict, row_to_beta_invite


class PostgresBetaInviteRepository(BetaInviteRepository):
    """PostgreSQL implementation of BetaInviteRepository.

    Email and code uniqueness come from the table's unique constraints.
    """

    def __init__(self, session: AsyncSession, table: Table) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            table: Beta table, including configured additional columns
        """
        self.session = session
        self.table = table

    async def _find_one(self, *conditions) -> Optional[BetaInvite]:
        stmt = select(self.table).where(and_(*conditions)).limit(1)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_beta_invite(row) if row else None

    async def find_by_email(self, email: str) -> Optional[BetaInvite]:
        """Find the invite bound to an email."""
        return await self._find_one(self.table.c.email == email)

    async def find_by_code(self, code: InviteCode) -> Optional[BetaInvite]:
        """Find an invite by code."""
        return await self._find_one(self.table.c.code == code.root)

    async def find_by_email_and_code(
        self, email: str, code: InviteCode
    ) -> Optional[BetaInvite]:
        """Find an invite matching both email and code."""
        return await self._find_one(
            self.table.c.email == email,
            self.table.c.code == code.root,
        )

    async def find_wildcard_by_code(self, code: InviteCode) -> Optional[BetaInvite]:
        """Find a wildcard invite by code."""
        return await self._find_one(
            self.table.c.code == code.root,
            self.table.c.wildcard.is_(True),
        )

    async def save(self, invite: BetaInvite) -> BetaInvite:
        """Insert an invite.

        Args:
            invite: Invite to save

        Returns:
            Saved invite

        Raises:
            IntegrityError: If the email or code is already taken
        """
        stmt = insert(self.table).values(**beta_invite_to_dict(invite))
        await self.session.execute(stmt)
        await self.session.flush()
        return invite

    async def delete_by_email(self, email: str) -> bool:
        """Delete the invite bound to an email."""
        stmt = (
            delete(self.table)
            .where(self.table.c.email == email)
            .returning(self.table.c.id)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def consume_wildcard(self, code: InviteCode) -> Optional[BetaInvite]:
        """Delete a wildcard invite in one statement and return it.

        DELETE ... RETURNING lets only one concurrent caller see the row.

        Args:
            code: Wildcard invite code

        Returns:
            The deleted invite, None if nothing was deleted
        """
        stmt = (
            delete(self.table)
            .where(
                and_(
                    self.table.c.code == code.root,
                    self.table.c.wildcard.is_(True),
                )
            )
            .returning(*self.table.c)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_beta_invite(row) if row else None
