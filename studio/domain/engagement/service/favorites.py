"""Favorites ledger backed by the local store."""

import logging
from collections.abc import Callable

from pydantic import ValidationError as PydanticValidationError

from studio.domain.content.model.content import ContentType
from studio.domain.engagement.model.favorite import FavoriteEntry, FavoriteMetadata
from studio.domain.shared import storage_keys
from studio.domain.shared.error import StorageQuotaError
from studio.domain.shared.port.local_store import LocalStore
from studio.domain.shared.port.notifier import Notifier

logger = logging.getLogger(__name__)

MetadataLookup = Callable[[str], FavoriteMetadata | None]


class FavoritesLedger:
    """All favorites on this device, for every viewer, under one key."""

    def __init__(self, local_store: LocalStore, notifier: Notifier) -> None:
        self._local_store = local_store
        self._notifier = notifier
        self._entries: list[FavoriteEntry] = []
        self.reload()

    def reload(self) -> None:
        raw = self._local_store.get(storage_keys.FAVORITES)
        self._entries = []
        if not isinstance(raw, list):
            return
        for entry in raw:
            try:
                self._entries.append(FavoriteEntry.model_validate(entry))
            except PydanticValidationError:
                logger.error("Skipping unreadable favorite entry: %r", entry)

    def toggle(
        self,
        viewer_id: str | None,
        content_id: str,
        content_type: ContentType,
        metadata: FavoriteMetadata,
    ) -> bool:
        """Flip the favorite state. Returns True if the item is now favorited."""
        if self._find(viewer_id, content_id, content_type) is not None:
            self._drop(viewer_id, content_id, content_type)
            if self._persist():
                self._notifier.success("Removed from favorites")
            return False

        self._entries.append(
            FavoriteEntry(
                viewer_id=viewer_id,
                content_id=content_id,
                content_type=content_type,
                metadata=metadata,
            )
        )
        if self._persist():
            self._notifier.success("Added to favorites")
        return True

    def is_favorited(self, viewer_id: str | None, content_id: str, content_type: ContentType) -> bool:
        return self._find(viewer_id, content_id, content_type) is not None

    def list_favorites(
        self, viewer_id: str | None, content_type: ContentType | None = None
    ) -> list[FavoriteEntry]:
        """Newest first."""
        entries = [
            e
            for e in self._entries
            if e.viewer_id == viewer_id and (content_type is None or e.content_type == content_type)
        ]
        return sorted(entries, key=lambda e: e.created_at, reverse=True)

    def count(self, viewer_id: str | None, content_type: ContentType | None = None) -> int:
        return len(self.list_favorites(viewer_id, content_type))

    def remove(self, viewer_id: str | None, content_id: str, content_type: ContentType) -> None:
        """Drop a favorite, e.g. when its content is deleted. Silent if absent."""
        if self._drop(viewer_id, content_id, content_type):
            self._persist()

    def clear_all(self, viewer_id: str | None) -> None:
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.viewer_id != viewer_id]
        if len(self._entries) != before:
            self._persist()

    def entries_for(self, viewer_id: str | None) -> list[FavoriteEntry]:
        """Entries in insertion order."""
        return [e for e in self._entries if e.viewer_id == viewer_id]

    def migrate_legacy(self, viewer_id: str | None, metadata_lookup: MetadataLookup | None = None) -> int:
        """Move the legacy global gradient-favorite id list under viewer_id.

        Returns the number of entries added. The legacy key is removed
        afterwards, so a second run finds nothing to do.
        """
        legacy = self._local_store.get(storage_keys.LEGACY_GRADIENT_FAVORITES)
        if legacy is None:
            return 0
        if not isinstance(legacy, list):
            logger.error("Discarding unreadable legacy gradient favorites")
            self._local_store.remove(storage_keys.LEGACY_GRADIENT_FAVORITES)
            return 0

        added = 0
        for gradient_id in dict.fromkeys(str(i) for i in legacy):
            if self.is_favorited(viewer_id, gradient_id, ContentType.GRADIENT):
                continue
            metadata = (metadata_lookup(gradient_id) if metadata_lookup else None) or FavoriteMetadata(
                title=gradient_id
            )
            self._entries.append(
                FavoriteEntry(
                    viewer_id=viewer_id,
                    content_id=gradient_id,
                    content_type=ContentType.GRADIENT,
                    metadata=metadata,
                )
            )
            added += 1

        if added and not self._persist():
            return 0
        self._local_store.remove(storage_keys.LEGACY_GRADIENT_FAVORITES)
        logger.info("Migrated %d legacy gradient favorites", added)
        return added

    def forget(self, viewer_ids: set[str | None]) -> None:
        """Drop the entries of the given viewers; removes the key once empty."""
        self._entries = [e for e in self._entries if e.viewer_id not in viewer_ids]
        if self._entries:
            self._persist()
        else:
            self._local_store.remove(storage_keys.FAVORITES)

    def _find(self, viewer_id: str | None, content_id: str, content_type: ContentType) -> FavoriteEntry | None:
        key = (viewer_id, content_id, content_type)
        return next((e for e in self._entries if e.key == key), None)

    def _drop(self, viewer_id: str | None, content_id: str, content_type: ContentType) -> bool:
        key = (viewer_id, content_id, content_type)
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.key != key]
        return len(self._entries) != before

    def _persist(self) -> bool:
        try:
            self._local_store.set(
                storage_keys.FAVORITES, [e.model_dump(mode="json") for e in self._entries]
            )
        except StorageQuotaError as e:
            logger.warning("Favorites not saved: %s", e.message)
            self._notifier.error("Failed to update favorites")
            return False
        return True
