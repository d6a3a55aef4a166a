"""Content service: catalog + overlays + visibility, as seen by one viewer."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from studio.domain.auth.model.identity import Viewer
from studio.domain.content.model.catalog import CanonicalCatalog
from studio.domain.content.model.content import ContentBase, ContentType, Gradient
from studio.domain.content.model.value import generate_content_id
from studio.domain.content.service.overlay import ContentOverlays, ContentOverlayStore
from studio.domain.content.service.visibility import filter_accessible, is_accessible, locked_count
from studio.domain.shared.error import AuthorizationError, NotFoundError
from studio.domain.shared.service import Service

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"


@dataclass(frozen=True)
class ContentListing:
    items: list[ContentBase]
    locked: int
    categories: list[str]


class ContentService(Service):
    _catalog: CanonicalCatalog
    _overlays: ContentOverlays

    def overlay(self, content_type: ContentType) -> ContentOverlayStore:
        return self._overlays[content_type]

    def all_items(self, content_type: ContentType) -> list[ContentBase]:
        """Effective items of a type, ignoring visibility."""
        return self.overlay(content_type).get_all_effective(self._catalog.items(content_type))

    def get_item(self, content_type: ContentType, item_id: str) -> ContentBase | None:
        return self.overlay(content_type).get_effective(
            item_id, lambda i: self._catalog.lookup(content_type, i)
        )

    def list_items(
        self,
        content_type: ContentType,
        viewer: Viewer | None,
        category: str = ALL_CATEGORIES,
        include_locked: bool = True,
    ) -> ContentListing:
        """List effective items for a viewer.

        With ``include_locked`` the private items stay in the list (rendered
        as locked cards); otherwise they are dropped. ``locked`` counts them
        either way.
        """
        items = self.all_items(content_type)
        if category != ALL_CATEGORIES:
            items = [i for i in items if getattr(i, "category", "") == category]
        locked = locked_count(items, viewer)
        if not include_locked:
            items = filter_accessible(items, viewer)
        return ContentListing(items=items, locked=locked, categories=self.categories(content_type))

    def categories(self, content_type: ContentType) -> list[str]:
        seen = dict.fromkeys(self._catalog.categories(content_type))
        for item in self.overlay(content_type).custom_items():
            category = getattr(item, "category", "")
            if category:
                seen.setdefault(category, None)
        return list(seen)

    def open_item(self, content_type: ContentType, item_id: str, viewer: Viewer | None) -> ContentBase:
        item = self.get_item(content_type, item_id)
        if item is None:
            raise NotFoundError(f"{content_type.value} not found: {item_id}")
        if not is_accessible(item, viewer):
            raise AuthorizationError(
                "Sign up to view this content", code="signup_required"
            )
        return item

    def duplicate(self, content_type: ContentType, item_id: str) -> ContentBase:
        """Copy an item as a new custom item titled '<title> (Copy)'."""
        source = self.get_item(content_type, item_id)
        if source is None:
            raise NotFoundError(f"{content_type.value} not found: {item_id}")
        update: dict = {
            "id": generate_content_id(content_type),
            "created_at": datetime.now(UTC),
            "updated_at": None,
        }
        if hasattr(source, "title"):
            update["title"] = f"{source.title} (Copy)"
        if hasattr(source, "name"):
            update["name"] = f"{source.name} (Copy)"
        if isinstance(source, Gradient):
            update["is_custom"] = True
        copy = source.model_copy(update=update, deep=True)
        logger.info("Duplicating %s %s as %s", content_type.value, item_id, copy.id)
        return self.overlay(content_type).create_custom(copy)
