"""Content overlay store: local edits and local creations over canonical content."""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from studio.domain.content.model.catalog import CanonicalCatalog
from studio.domain.content.model.content import ContentBase, ContentType, parse_as
from studio.domain.content.model.value import generate_content_id
from studio.domain.shared import storage_keys
from studio.domain.shared.error import StorageQuotaError, ValidationError
from studio.domain.shared.port.local_store import LocalStore
from studio.domain.shared.port.notifier import Notifier

logger = logging.getLogger(__name__)

CanonicalLookup = Callable[[str], ContentBase | None]


class ContentOverlayStore:
    """Overlay for one content type.

    Effective content for id X is overlay[X] when present, else canonical[X].
    Custom items live in both the custom list and the overlay so they resolve
    through the same lookup path. Every mutation persists the full snapshot;
    a rejected write is reported and the in-memory state stays authoritative.
    """

    def __init__(
        self,
        content_type: ContentType,
        local_store: LocalStore,
        notifier: Notifier,
        canonical_ids: Iterable[str] = (),
        id_factory: Callable[[ContentType], str] = generate_content_id,
    ) -> None:
        self.content_type = content_type
        self._local_store = local_store
        self._notifier = notifier
        self._canonical_ids = frozenset(canonical_ids)
        self._id_factory = id_factory
        self._edited: dict[str, ContentBase] = {}
        self._custom: list[ContentBase] = []
        self.reload()

    @property
    def custom_key(self) -> str:
        return storage_keys.custom_key(self.content_type)

    @property
    def edited_key(self) -> str:
        return storage_keys.edited_key(self.content_type)

    # --- reads ---------------------------------------------------------------

    def get_effective(self, item_id: str, canonical_lookup: CanonicalLookup) -> ContentBase | None:
        overlaid = self._edited.get(item_id)
        if overlaid is not None:
            return overlaid
        canonical = canonical_lookup(item_id)
        if canonical is None:
            logger.warning(
                "No canonical or custom %s for id %s; rendering nothing",
                self.content_type.value,
                item_id,
            )
        return canonical

    def get_all_effective(
        self,
        canonical_list: Iterable[ContentBase],
        custom_list: Iterable[ContentBase] | None = None,
    ) -> list[ContentBase]:
        """Canonical items in declared order, then custom items in creation order."""
        custom = self._custom if custom_list is None else list(custom_list)
        effective: list[ContentBase] = []
        for item in [*canonical_list, *custom]:
            resolved = self.get_effective(item.id, lambda _id, item=item: item)
            if resolved is not None:
                effective.append(resolved)
        return effective

    def custom_items(self) -> list[ContentBase]:
        return list(self._custom)

    def edited_items(self) -> dict[str, ContentBase]:
        return dict(self._edited)

    def is_custom(self, item_id: str) -> bool:
        return any(item.id == item_id for item in self._custom)

    def has_local_data(self) -> bool:
        return bool(self._custom or self._edited)

    # --- mutations -----------------------------------------------------------

    def apply_edit(self, item: ContentBase) -> ContentBase:
        """Upsert item into the overlay by id. Idempotent.

        A custom item is also replaced in the custom list, so listings built
        from it (categories, creation order) see the edited copy.
        """
        self._check_type(item)
        self._edited[item.id] = item
        self._custom = [item if c.id == item.id else c for c in self._custom]
        self._persist()
        return item

    def create_custom(self, item: ContentBase) -> ContentBase:
        """Add a locally created item, assigning a fresh id if it would collide."""
        self._check_type(item)
        taken = self._canonical_ids | {c.id for c in self._custom} | set(self._edited)
        if item.id in taken:
            new_id = self._id_factory(self.content_type)
            while new_id in taken:
                new_id = self._id_factory(self.content_type)
            item = item.model_copy(update={"id": new_id})
        self._custom.append(item)
        self._edited[item.id] = item
        self._persist()
        return item

    def delete_custom(self, item_id: str) -> bool:
        """Remove a custom item from the custom list and the overlay.

        Returns False for ids that are not custom. Edits of canonical items
        are left alone; ``discard_edit`` reverts those.
        """
        if not self.is_custom(item_id):
            return False
        self._custom = [c for c in self._custom if c.id != item_id]
        self._edited.pop(item_id, None)
        self._persist()
        return True

    def discard_edit(self, item_id: str) -> bool:
        """Drop a local edit of a canonical item, reverting to canonical."""
        if self.is_custom(item_id) or item_id not in self._edited:
            return False
        del self._edited[item_id]
        self._persist()
        return True

    def clear(self) -> None:
        """Forget all local data for this type (after migration)."""
        self._custom = []
        self._edited = {}
        self._local_store.remove(self.custom_key)
        self._local_store.remove(self.edited_key)

    def reload(self) -> None:
        """Re-read the persisted snapshot from the local store."""
        self._custom = self._load_list(self._local_store.get(self.custom_key))
        edited = self._local_store.get(self.edited_key)
        self._edited = {}
        if isinstance(edited, dict):
            for item_id, raw in edited.items():
                item = self._parse(raw)
                if item is not None:
                    self._edited[item_id] = item

    # --- internals -----------------------------------------------------------

    def _check_type(self, item: ContentBase) -> None:
        if item.content_type != self.content_type:
            raise ValidationError(
                f"Expected {self.content_type.value}, got {item.content_type.value}",
                field="type",
            )

    def _load_list(self, raw: Any) -> list[ContentBase]:
        if not isinstance(raw, list):
            return []
        items = [self._parse(entry) for entry in raw]
        return [item for item in items if item is not None]

    def _parse(self, raw: Any) -> ContentBase | None:
        if not isinstance(raw, dict):
            return None
        try:
            return parse_as(self.content_type, raw)
        except PydanticValidationError:
            logger.error("Skipping unreadable stored %s: %r", self.content_type.value, raw.get("id"))
            return None

    def _persist(self) -> bool:
        try:
            self._local_store.set(
                self.custom_key, [item.model_dump(mode="json") for item in self._custom]
            )
            self._local_store.set(
                self.edited_key,
                {item_id: item.model_dump(mode="json") for item_id, item in self._edited.items()},
            )
        except StorageQuotaError as e:
            logger.warning("Local %s snapshot not saved: %s", self.content_type.value, e.message)
            self._notifier.error("Changes could not be saved on this device (storage full)")
            return False
        return True


class ContentOverlays:
    """One overlay store per content type, keyed by ``ContentType``."""

    def __init__(
        self,
        local_store: LocalStore,
        notifier: Notifier,
        catalog: CanonicalCatalog,
        id_factory: Callable[[ContentType], str] = generate_content_id,
    ) -> None:
        self._stores = {
            content_type: ContentOverlayStore(
                content_type,
                local_store,
                notifier,
                canonical_ids=catalog.ids(content_type),
                id_factory=id_factory,
            )
            for content_type in ContentType
        }

    def __getitem__(self, content_type: ContentType) -> ContentOverlayStore:
        return self._stores[content_type]

    def has_local_data(self) -> bool:
        return any(store.has_local_data() for store in self._stores.values())

    def reload(self) -> None:
        for store in self._stores.values():
            store.reload()
