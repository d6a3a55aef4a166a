"""Migration engine: drains local overlays and favorites into the remote store."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import logfire

from studio.domain.content.model.content import BlogPost, ContentType, Gradient, Project
from studio.domain.content.service.overlay import ContentOverlays
from studio.domain.engagement.model.favorite import FavoriteEntry
from studio.domain.engagement.service.favorites import FavoritesLedger, MetadataLookup
from studio.domain.migration.model.policy import MigrationPolicy
from studio.domain.migration.model.result import Collection, MigrationResult, MigrationState
from studio.domain.migration.payload import (
    FAVORITES_CONFLICT,
    FAVORITES_TABLE,
    GRADIENTS_TABLE,
    POSTS_TABLE,
    PROJECTS_TABLE,
    favorite_row,
    gradient_row,
    post_row,
    project_row,
)
from studio.domain.shared import storage_keys
from studio.domain.shared.error import InfrastructureError
from studio.domain.shared.port.local_store import LocalStore
from studio.domain.shared.port.notifier import Notifier
from studio.domain.shared.port.remote_store import AuthProvider, RemoteStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Target:
    table: str
    on_conflict: str
    owner_column: str


_TARGETS: dict[Collection, _Target] = {
    Collection.GRADIENTS: _Target(GRADIENTS_TABLE, "id", "created_by"),
    Collection.FAVORITES: _Target(FAVORITES_TABLE, FAVORITES_CONFLICT, "user_id"),
    Collection.PROJECTS: _Target(PROJECTS_TABLE, "id", "created_by"),
    Collection.POSTS: _Target(POSTS_TABLE, "id", "created_by"),
}

# Collections whose remote rows count as "already migrated" for SKIP_IF_REMOTE_DATA.
_MARKER_COLLECTIONS = (Collection.GRADIENTS, Collection.FAVORITES)

_CONTENT_TYPES: dict[Collection, ContentType] = {
    Collection.GRADIENTS: ContentType.GRADIENT,
    Collection.PROJECTS: ContentType.PROJECT,
    Collection.POSTS: ContentType.BLOG_POST,
}


class MigrationEngine:
    """One-shot transfer of local data to the remote store after login.

    Collections are migrated one after another. A failure in one collection
    is recorded and never stops the next. Each collection that succeeds is
    purged locally; a failed one keeps its local data for the next login.
    """

    def __init__(
        self,
        local_store: LocalStore,
        remote_store: RemoteStore,
        auth_provider: AuthProvider,
        notifier: Notifier,
        overlays: ContentOverlays,
        favorites: FavoritesLedger,
        policy: MigrationPolicy = MigrationPolicy.SKIP_IF_REMOTE_DATA,
        notify: bool = True,
        metadata_lookup: MetadataLookup | None = None,
    ) -> None:
        self._local_store = local_store
        self._remote_store = remote_store
        self._auth_provider = auth_provider
        self._notifier = notifier
        self._overlays = overlays
        self._favorites = favorites
        self._policy = policy
        self._notify = notify
        self._metadata_lookup = metadata_lookup
        self.state = MigrationState.NOT_STARTED

    @property
    def policy(self) -> MigrationPolicy:
        return self._policy

    # --- precondition --------------------------------------------------------

    def has_local_data(self, viewer_id: str | None = None) -> bool:
        if self._overlays.has_local_data():
            return True
        if self._local_store.get(storage_keys.LEGACY_GRADIENT_FAVORITES):
            return True
        return bool(self._favorite_entries(viewer_id))

    async def should_migrate(self, viewer_id: str) -> bool:
        """Local data exists and the policy allows pushing it."""
        if not self.has_local_data(viewer_id):
            return False
        if self._policy == MigrationPolicy.SKIP_IF_REMOTE_DATA:
            for collection in _MARKER_COLLECTIONS:
                if await self._has_remote_data(collection, viewer_id):
                    logger.info(
                        "Skipping migration for %s: remote %s already present",
                        viewer_id,
                        collection.value,
                    )
                    return False
        return True

    async def _has_remote_data(self, collection: Collection, viewer_id: str) -> bool:
        target = _TARGETS[collection]
        response = await self._remote_store.select(
            target.table, {target.owner_column: viewer_id}, limit=1
        )
        if response.error is not None:
            # Unknown remote state is treated as present so nothing is overwritten.
            logger.warning(
                "Could not check remote %s for %s: %s",
                collection.value,
                viewer_id,
                response.error.message,
            )
            return True
        return bool(response.data)

    # --- run -----------------------------------------------------------------

    async def on_login(self, viewer_id: str) -> MigrationResult | None:
        """Re-scope legacy favorites, then migrate if the precondition holds."""
        self._favorites.migrate_legacy(viewer_id, self._metadata_lookup)
        if not await self.should_migrate(viewer_id):
            self.state = MigrationState.SKIPPED
            return None
        return await self.migrate(viewer_id)

    async def migrate(self, viewer_id: str | None = None) -> MigrationResult:
        result = MigrationResult()

        with logfire.span("MigrateLocalData"):
            if viewer_id is None and await self._auth_provider.is_authenticated():
                viewer_id = await self._auth_provider.current_viewer_id()
            if viewer_id is None:
                result.errors.append("Migration failed: User must be logged in to migrate data")
                result.state = MigrationState.COMPLETED_WITH_ERRORS
                self.state = result.state
                self._report(result)
                return result

            self.state = result.state = MigrationState.IN_PROGRESS
            logger.info("Starting data migration for %s (policy=%s)", viewer_id, self._policy)
            self._favorites.migrate_legacy(viewer_id, self._metadata_lookup)

            for collection in Collection:
                await self._migrate_collection(collection, viewer_id, result)

            result.state = (
                MigrationState.COMPLETED if not result.errors else MigrationState.COMPLETED_WITH_ERRORS
            )
            if result.state == MigrationState.COMPLETED:
                self._local_store.remove(storage_keys.SIGNUP_FLAG)
                self._local_store.remove(storage_keys.SIGNUP_DATA)
            self.state = result.state

            logfire.info(
                "Migration finished",
                viewer_id=viewer_id,
                state=result.state.value,
                migrated=result.migrated_items.model_dump(),
                errors=len(result.errors),
            )
            self._report(result)
            return result

    async def _migrate_collection(
        self, collection: Collection, viewer_id: str, result: MigrationResult
    ) -> None:
        name = collection.display_name
        target = _TARGETS[collection]
        try:
            if self._policy == MigrationPolicy.PER_COLLECTION and await self._has_remote_data(
                collection, viewer_id
            ):
                logger.info("Skipping %s for %s: remote data present", collection.value, viewer_id)
                result.skipped.append(collection)
                return

            rows = self._rows_for(collection, viewer_id)
            if rows:
                error = await self._remote_store.upsert(target.table, rows, on_conflict=target.on_conflict)
                if error is not None:
                    result.errors.append(f"{name} migration error: {error.message}")
                    logger.error("%s migration error for %s: %s", name, viewer_id, error.message)
                    return
                setattr(result.migrated_items, collection.value, len(rows))
                logger.info("Migrated %d %s", len(rows), collection.value)

            self._purge(collection, viewer_id)
        except InfrastructureError as e:
            result.errors.append(f"{name} migration failed: {e.message}")
            logger.error("%s migration failed for %s: %s", name, viewer_id, e.message)

    # --- collections ---------------------------------------------------------

    def _rows_for(self, collection: Collection, viewer_id: str) -> list[dict[str, Any]]:
        if collection == Collection.FAVORITES:
            return [favorite_row(e, viewer_id) for e in self._favorite_entries(viewer_id)]
        if collection == Collection.GRADIENTS:
            store = self._overlays[ContentType.GRADIENT]
            return [
                gradient_row(g, viewer_id, is_custom=g.is_custom or store.is_custom(g.id))
                for g in self._local_items(ContentType.GRADIENT)
            ]

        builders: dict[Collection, Callable[[Any, str], dict[str, Any]]] = {
            Collection.PROJECTS: project_row,
            Collection.POSTS: post_row,
        }
        build = builders[collection]
        items = self._local_items(_CONTENT_TYPES[collection])
        return [build(item, viewer_id) for item in items]

    def _local_items(self, content_type: ContentType) -> list[Gradient | Project | BlogPost]:
        """Custom items plus edited items, one per id; the edited copy wins."""
        store = self._overlays[content_type]
        merged: dict[str, Any] = {item.id: item for item in store.custom_items()}
        merged.update(store.edited_items())
        return list(merged.values())

    def _favorite_entries(self, viewer_id: str | None) -> list[FavoriteEntry]:
        """Guest entries plus the viewer's own, one per (content_id, content_type)."""
        merged: dict[tuple[str, ContentType], FavoriteEntry] = {}
        for entry in self._favorites.entries_for(None):
            merged[(entry.content_id, entry.content_type)] = entry
        if viewer_id is not None:
            for entry in self._favorites.entries_for(viewer_id):
                merged[(entry.content_id, entry.content_type)] = entry
        return list(merged.values())

    def _purge(self, collection: Collection, viewer_id: str) -> None:
        if collection == Collection.FAVORITES:
            self._favorites.forget({None, viewer_id})
            self._local_store.remove(storage_keys.LEGACY_GRADIENT_FAVORITES)
            return
        self._overlays[_CONTENT_TYPES[collection]].clear()

    def _report(self, result: MigrationResult) -> None:
        if not self._notify:
            return
        if result.errors:
            self._notifier.error(result.summary())
        else:
            self._notifier.success(result.summary())
