"""Remote row builders for migrated local data.

Rows are keyed by the item id (favorites by owner + content) so that
re-running a migration upserts onto the same records.
"""

from typing import Any

from studio.domain.content.model.content import BlogPost, Gradient, Project
from studio.domain.engagement.model.favorite import FavoriteEntry

GRADIENTS_TABLE = "gradients"
FAVORITES_TABLE = "user_favorites"
PROJECTS_TABLE = "projects"
POSTS_TABLE = "blog_posts"

FAVORITES_CONFLICT = "user_id,content_id,content_type"


def gradient_row(gradient: Gradient, viewer_id: str, is_custom: bool | None = None) -> dict[str, Any]:
    """Row for a gradient; ``is_custom`` overrides the flag carried on the item."""
    return {
        "id": gradient.id,
        "name": gradient.name,
        "category": gradient.category,
        "tags": list(gradient.tags),
        "colors": [c.model_dump() for c in gradient.colors],
        "direction": gradient.direction or "to right",
        "css": gradient.render_css(),
        "is_custom": gradient.is_custom if is_custom is None else is_custom,
        "is_public": not gradient.is_private,
        "created_by": viewer_id,
    }


def favorite_row(entry: FavoriteEntry, viewer_id: str) -> dict[str, Any]:
    return {
        "user_id": viewer_id,
        "content_id": entry.content_id,
        "content_type": entry.content_type.value,
        "metadata": entry.metadata.model_dump(),
        "created_at": entry.created_at,
    }


def project_row(project: Project, viewer_id: str) -> dict[str, Any]:
    return {
        "id": project.id,
        "title": project.title,
        "description": project.description,
        "category": project.category,
        "tags": list(project.tags),
        "image_url": project.image or None,
        "is_featured": project.featured,
        "is_public": not project.is_private,
        "content": [s.model_dump() for s in project.sections],
        "created_by": viewer_id,
    }


def post_row(post: BlogPost, viewer_id: str) -> dict[str, Any]:
    content: Any = post.content or [b.model_dump() for b in post.content_blocks]
    return {
        "id": post.id,
        "title": post.title,
        "slug": post.effective_slug,
        "excerpt": post.excerpt,
        "content": content,
        "image_url": post.cover_image or None,
        "category": post.category,
        "tags": list(post.tags),
        "is_featured": post.featured,
        "is_public": not post.is_private,
        "status": "published",
        "created_by": viewer_id,
    }
