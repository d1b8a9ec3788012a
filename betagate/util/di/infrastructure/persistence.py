"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy import MetaData, Table
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from betagate.config import BetaSettings, Settings
from betagate.domain.repository import BetaInviteRepository
from betagate.domain.service import InviteFieldSchema
from betagate.persistence.database import create_engine, create_session_factory
from betagate.persistence.repository import PostgresBetaInviteRepository
from betagate.persistence.tables import create_beta_table
from betagate.util.di.base import ProviderBase
from betagate.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.APP)
    def get_beta_table(
        self, beta_settings: BetaSettings, field_schema: InviteFieldSchema
    ) -> Table:
        """Provide the beta table with configured additional columns."""
        return create_beta_table(
            MetaData(), beta_settings.table_name, field_schema.fields
        )

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_beta_invite_repository(
        self, session: AsyncSession, table: Table
    ) -> BetaInviteRepository:
        """Provide BetaInvite repository."""
        return PostgresBetaInviteRepository(session, table)
