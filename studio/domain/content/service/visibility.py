"""Visibility classifier: who may see and who may edit a content item.

Viewer precedence (real user over local signup) is settled by
``resolve_viewer`` before a viewer reaches these checks.
"""

from collections.abc import Iterable
from typing import TypeVar

from studio.domain.auth.model.identity import Principal, Viewer
from studio.domain.content.model.content import ContentBase, Visibility

T = TypeVar("T", bound=ContentBase)


def is_accessible(item: ContentBase, viewer: Viewer | None) -> bool:
    """Public items are open to everyone; private items to any signed-in identity."""
    if item.visibility == Visibility.PUBLIC:
        return True
    return viewer is not None and viewer.is_authenticated


def can_edit_item(item: ContentBase, viewer: Viewer | None) -> bool:
    """Only real users whose role grants editing. Local signups never edit."""
    if not isinstance(viewer, Principal):
        return False
    return viewer.capabilities.can_edit


def filter_accessible(items: Iterable[T], viewer: Viewer | None) -> list[T]:
    return [item for item in items if is_accessible(item, viewer)]


def locked_count(items: Iterable[ContentBase], viewer: Viewer | None) -> int:
    """Number of items hidden from this viewer (shown as a sign-up teaser)."""
    return sum(1 for item in items if not is_accessible(item, viewer))
