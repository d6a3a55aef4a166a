"""Content items: projects, blog posts and gradients as one tagged union."""

from datetime import datetime
from enum import StrEnum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel


class ContentType(StrEnum):
    PROJECT = "project"
    BLOG_POST = "blog_post"
    GRADIENT = "gradient"


class Visibility(StrEnum):
    PUBLIC = "public"
    PRIVATE = "private"


class ContentBase(BaseModel):
    """Fields shared by every content item.

    `id` is stable for the item's lifetime; edits never change it.
    Accepts camelCase keys from older stored blobs.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: str = Field(min_length=1)
    visibility: Visibility = Visibility.PUBLIC
    created_at: datetime | None = None
    updated_at: datetime | None = None
    created_by: str | None = None

    @field_validator("visibility", mode="before")
    @classmethod
    def normalize_visibility(cls, v: Any) -> Any:
        if v == "premium":
            return Visibility.PRIVATE
        return v

    @property
    def content_type(self) -> ContentType:
        return ContentType(getattr(self, "type"))

    @property
    def is_private(self) -> bool:
        return self.visibility == Visibility.PRIVATE

    @property
    def label(self) -> str:
        """Human title used in notifications and favorites."""
        return getattr(self, "title", None) or getattr(self, "name", None) or self.id


# =============================================================================
# Projects
# =============================================================================


class ImpactMetric(BaseModel):
    metric: str
    value: str


class SectionMetric(BaseModel):
    value: str
    label: str


class ProjectSection(BaseModel):
    title: str
    content: str
    image: str | None = None
    metrics: list[SectionMetric] = []


class Project(ContentBase):
    type: Literal["project"] = "project"
    title: str = ""
    description: str = ""
    category: str = ""
    duration: str = ""
    team: str = ""
    role: str = ""
    image: str = ""
    featured: bool = False
    technologies: list[str] = []
    tags: list[str] = []
    impact: list[ImpactMetric] = []
    sections: list[ProjectSection] = []


# =============================================================================
# Blog posts
# =============================================================================

BlockType = Literal["text", "image", "quote", "heading", "divider", "code", "video", "gallery"]


class ContentBlock(BaseModel):
    id: str
    type: BlockType
    content: dict[str, Any] = {}
    style: dict[str, Any] = {}


class BlogPost(ContentBase):
    type: Literal["blog_post"] = "blog_post"
    title: str = ""
    slug: str = ""
    excerpt: str = ""
    content: str = ""
    content_blocks: list[ContentBlock] = []
    author: str = ""
    author_role: str = ""
    author_avatar: str = ""
    published_at: str = ""
    read_time: str = ""
    category: str = ""
    tags: list[str] = []
    cover_image: str = ""
    featured: bool = False
    likes: int = 0
    views: int = 0

    @property
    def effective_slug(self) -> str:
        return self.slug or "-".join(self.title.lower().split())


# =============================================================================
# Gradients
# =============================================================================


class GradientColor(BaseModel):
    hex: str
    name: str = ""
    position: float = 0


class Gradient(ContentBase):
    type: Literal["gradient"] = "gradient"
    name: str = ""
    description: str = ""
    category: str = ""
    tags: list[str] = []
    colors: list[GradientColor] = []
    css: str = ""
    direction: str = "to right"
    is_custom: bool = False

    def render_css(self) -> str:
        if self.css:
            return self.css
        stops = ", ".join(f"{c.hex} {c.position:g}%" for c in self.colors)
        return f"linear-gradient({self.direction}, {stops})"


ContentItem = Annotated[Union[Project, BlogPost, Gradient], Field(discriminator="type")]

_CONTENT_ADAPTER: TypeAdapter[ContentItem] = TypeAdapter(ContentItem)

MODEL_FOR_TYPE: dict[ContentType, type[ContentBase]] = {
    ContentType.PROJECT: Project,
    ContentType.BLOG_POST: BlogPost,
    ContentType.GRADIENT: Gradient,
}


def parse_content_item(data: dict[str, Any]) -> ContentItem:
    """Parse a stored/serialized item using its `type` discriminant."""
    return _CONTENT_ADAPTER.validate_python(data)


def parse_as(content_type: ContentType, data: dict[str, Any]) -> ContentItem:
    """Parse data as the given type, filling the discriminant if missing."""
    return parse_content_item({**data, "type": content_type.value})


def dump_content_item(item: ContentBase) -> dict[str, Any]:
    return item.model_dump(mode="json")
