from dishka import Scope, provide

from studio.domain.engagement.service.favorites import FavoritesLedger
from studio.domain.shared.port.local_store import LocalStore
from studio.domain.shared.port.notifier import Notifier
from studio.util.di.base import ProviderBase


class EngagementProvider(ProviderBase):
    @provide(scope=Scope.APP)
    def get_favorites(self, local_store: LocalStore, notifier: Notifier) -> FavoritesLedger:
        return FavoritesLedger(local_store, notifier)
