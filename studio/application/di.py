from dishka import AsyncContainer, make_async_container

from studio.config import Config
from studio.domain.auth.util.di.provider import AuthServiceProvider
from studio.domain.content.util.di.provider import ContentProvider
from studio.domain.engagement.util.di.provider import EngagementProvider
from studio.domain.migration.util.di.provider import MigrationProvider
from studio.infrastructure.local.di import LocalProvider
from studio.infrastructure.persistence.di import PersistenceProvider, RemoteStoreProvider
from studio.util.di.base import get_provider


def create_container(config: Config | None = None) -> AsyncContainer:
    config = config or Config()
    remote_store_provider = get_provider(RemoteStoreProvider, use_mock=config.database.demo_mode)

    return make_async_container(
        LocalProvider(),
        PersistenceProvider(),
        remote_store_provider(),
        AuthServiceProvider(),
        ContentProvider(),
        EngagementProvider(),
        MigrationProvider(),
        context={Config: config},
    )
