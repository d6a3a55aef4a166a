"""Canonical content: the built-in items shipped with the site."""

from collections.abc import Iterable

from studio.domain.content.model.content import ContentBase, ContentItem, ContentType


class CanonicalCatalog:
    """Ordered, read-only canonical items per content type."""

    def __init__(self, items: Iterable[ContentItem] = ()) -> None:
        self._by_type: dict[ContentType, list[ContentBase]] = {t: [] for t in ContentType}
        self._index: dict[tuple[ContentType, str], ContentBase] = {}
        for item in items:
            key = (item.content_type, item.id)
            if key in self._index:
                raise ValueError(f"Duplicate canonical id: {item.content_type}/{item.id}")
            self._by_type[item.content_type].append(item)
            self._index[key] = item

    def items(self, content_type: ContentType) -> list[ContentBase]:
        """Items of a type in declared order."""
        return list(self._by_type[content_type])

    def lookup(self, content_type: ContentType, item_id: str) -> ContentBase | None:
        return self._index.get((content_type, item_id))

    def ids(self, content_type: ContentType) -> set[str]:
        return {item.id for item in self._by_type[content_type]}

    def categories(self, content_type: ContentType) -> list[str]:
        seen: dict[str, None] = {}
        for item in self._by_type[content_type]:
            category = getattr(item, "category", "")
            if category:
                seen.setdefault(category, None)
        return ["All", *seen]
