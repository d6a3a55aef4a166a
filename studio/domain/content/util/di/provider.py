from dishka import Scope, provide

from studio.domain.content.command.edit import (
    CreateContentHandler,
    DeleteContentHandler,
    DuplicateContentHandler,
    UpdateContentHandler,
)
from studio.domain.content.model.catalog import CanonicalCatalog
from studio.domain.content.model.defaults import default_catalog
from studio.domain.content.service.content import ContentService
from studio.domain.content.service.overlay import ContentOverlays
from studio.domain.shared.port.local_store import LocalStore
from studio.domain.shared.port.notifier import Notifier
from studio.util.di.base import ProviderBase


class ContentProvider(ProviderBase):
    @provide(scope=Scope.APP)
    def get_catalog(self) -> CanonicalCatalog:
        return default_catalog()

    @provide(scope=Scope.APP)
    def get_overlays(
        self, local_store: LocalStore, notifier: Notifier, catalog: CanonicalCatalog
    ) -> ContentOverlays:
        return ContentOverlays(local_store, notifier, catalog)

    service = provide(ContentService, scope=Scope.REQUEST)

    # Command Handlers
    create_handler = provide(CreateContentHandler, scope=Scope.REQUEST)
    update_handler = provide(UpdateContentHandler, scope=Scope.REQUEST)
    duplicate_handler = provide(DuplicateContentHandler, scope=Scope.REQUEST)
    delete_handler = provide(DeleteContentHandler, scope=Scope.REQUEST)
