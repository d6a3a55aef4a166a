"""Favorite entries: one viewer marking one content item."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from studio.domain.content.model.content import ContentBase, ContentType


class FavoriteMetadata(BaseModel):
    """Snapshot of the item's display fields at the time it was favorited."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    image: str | None = None
    description: str | None = None
    category: str | None = None
    tags: list[str] = []
    is_private: bool = False

    @classmethod
    def of(cls, item: ContentBase) -> "FavoriteMetadata":
        return cls(
            title=item.label,
            image=getattr(item, "image", None) or getattr(item, "cover_image", None) or None,
            description=getattr(item, "description", None) or getattr(item, "excerpt", None) or None,
            category=getattr(item, "category", None) or None,
            tags=list(getattr(item, "tags", [])),
            is_private=item.is_private,
        )


class FavoriteEntry(BaseModel):
    """Unique per (viewer_id, content_id, content_type). A None viewer is the guest."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    viewer_id: str | None = None
    content_id: str
    content_type: ContentType
    metadata: FavoriteMetadata
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def key(self) -> tuple[str | None, str, ContentType]:
        return (self.viewer_id, self.content_id, self.content_type)
