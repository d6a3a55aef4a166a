import logging
from typing import AsyncIterable

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from studio.config import Config, DatabaseConfig
from studio.domain.auth.port.role_request_repository import RoleRequestRepository
from studio.domain.auth.port.user_repository import UserRepository
from studio.domain.shared.port.remote_store import RemoteStore
from studio.infrastructure.persistence.adapter.remote_store import (
    InMemoryRemoteStore,
    SqlAlchemyRemoteStore,
)
from studio.infrastructure.persistence.database import (
    create_db_engine,
    create_schema,
    create_session_factory,
)
from studio.infrastructure.persistence.repository.role_request import (
    SqlAlchemyRoleRequestRepository,
)
from studio.infrastructure.persistence.repository.user import SqlAlchemyUserRepository
from studio.util.di.base import ProviderBase

logger = logging.getLogger(__name__)

DEMO_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class PersistenceProvider(ProviderBase):
    # Factories require method syntax
    @provide(scope=Scope.APP)
    async def get_engine(self, config: Config) -> AsyncIterable[AsyncEngine]:
        db = config.database
        if db.demo_mode:
            logger.info("No database url configured; profiles kept in memory")
            db = DatabaseConfig(url=DEMO_DATABASE_URL, echo=db.echo)
        engine = create_db_engine(db)
        if db.auto_create:
            await create_schema(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterable[AsyncSession]:
        # Commits when the request scope closes
        async with session_factory() as session:
            yield session
            await session.commit()

    # Repositories
    user_repo = provide(SqlAlchemyUserRepository, scope=Scope.REQUEST, provides=UserRepository)
    role_request_repo = provide(
        SqlAlchemyRoleRequestRepository, scope=Scope.REQUEST, provides=RoleRequestRepository
    )


class RemoteStoreProvider(ProviderBase):
    __mock_component__ = "remote_store"


class SqlAlchemyRemoteStoreProvider(RemoteStoreProvider):
    remote_store = provide(SqlAlchemyRemoteStore, scope=Scope.APP, provides=RemoteStore)


class InMemoryRemoteStoreProvider(RemoteStoreProvider):
    __is_mock__ = True

    remote_store = provide(InMemoryRemoteStore, scope=Scope.APP, provides=RemoteStore)
