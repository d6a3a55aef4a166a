from dishka import Scope, provide

from studio.config import Config
from studio.domain.content.model.catalog import CanonicalCatalog
from studio.domain.content.model.content import ContentType
from studio.domain.content.service.overlay import ContentOverlays
from studio.domain.engagement.model.favorite import FavoriteMetadata
from studio.domain.engagement.service.favorites import FavoritesLedger, MetadataLookup
from studio.domain.migration.service.migration import MigrationEngine
from studio.domain.shared.port.local_store import LocalStore
from studio.domain.shared.port.notifier import Notifier
from studio.domain.shared.port.remote_store import AuthProvider, RemoteStore
from studio.util.di.base import ProviderBase


def gradient_metadata(catalog: CanonicalCatalog, overlays: ContentOverlays) -> MetadataLookup:
    """Metadata for legacy gradient favorites, from the effective gradient."""

    def lookup(gradient_id: str) -> FavoriteMetadata | None:
        item = overlays[ContentType.GRADIENT].get_effective(
            gradient_id, lambda i: catalog.lookup(ContentType.GRADIENT, i)
        )
        return FavoriteMetadata.of(item) if item is not None else None

    return lookup


class MigrationProvider(ProviderBase):
    @provide(scope=Scope.APP)
    def get_engine(
        self,
        config: Config,
        local_store: LocalStore,
        remote_store: RemoteStore,
        auth_provider: AuthProvider,
        notifier: Notifier,
        catalog: CanonicalCatalog,
        overlays: ContentOverlays,
        favorites: FavoritesLedger,
    ) -> MigrationEngine:
        return MigrationEngine(
            local_store,
            remote_store,
            auth_provider,
            notifier,
            overlays,
            favorites,
            policy=config.migration.precondition,
            notify=config.migration.notify,
            metadata_lookup=gradient_metadata(catalog, overlays),
        )
