import logging

from dishka import Scope, alias, from_context, provide

from studio.config import Config
from studio.domain.shared.port.local_store import LocalStore
from studio.domain.shared.port.notifier import Notifier
from studio.domain.shared.port.remote_store import AuthProvider
from studio.infrastructure.auth.session import SessionAuthProvider
from studio.infrastructure.local.file import JsonFileLocalStore
from studio.infrastructure.local.memory import InMemoryLocalStore
from studio.infrastructure.notify.logging import LoggingNotifier
from studio.util.di.base import ProviderBase

logger = logging.getLogger(__name__)


class LocalProvider(ProviderBase):
    """Device-side adapters: local store, notifier and the signed-in session."""

    config = from_context(provides=Config, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_local_store(self, config: Config) -> LocalStore:
        if config.storage.path:
            logger.info("Local store: %s", config.storage.path)
            return JsonFileLocalStore(config.storage.path, quota_bytes=config.storage.quota_bytes)
        logger.info("Local store: in memory")
        return InMemoryLocalStore(quota_bytes=config.storage.quota_bytes)

    @provide(scope=Scope.APP)
    def get_notifier(self) -> LoggingNotifier:
        return LoggingNotifier()

    notifier_port = alias(source=LoggingNotifier, provides=Notifier)

    @provide(scope=Scope.APP)
    def get_session(self) -> SessionAuthProvider:
        return SessionAuthProvider()

    auth_provider = alias(source=SessionAuthProvider, provides=AuthProvider)
