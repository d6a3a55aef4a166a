"""Well-known local store keys.

Each key holds a JSON value; an absent key is an empty collection.
"""

from studio.domain.content.model.content import ContentType

SIGNUP_FLAG = "user-signed-up"
SIGNUP_DATA = "user-data"

FAVORITES = "user-favorites"
LEGACY_GRADIENT_FAVORITES = "gradient-favorites"

_PLURALS: dict[ContentType, str] = {
    ContentType.PROJECT: "projects",
    ContentType.BLOG_POST: "posts",
    ContentType.GRADIENT: "gradients",
}

SIGNUP_PROFILE_ID = "signup-user"


def custom_key(content_type: ContentType) -> str:
    """Key of the locally created items list for a content type."""
    return f"custom-{_PLURALS[content_type]}"


def edited_key(content_type: ContentType) -> str:
    """Key of the id -> edited item overlay map for a content type."""
    return f"edited-{_PLURALS[content_type]}"


def profile_key(viewer_id: str | None) -> str:
    return f"user-profile-{viewer_id or SIGNUP_PROFILE_ID}"
