"""Field-level validation of content items before they reach storage."""

import re

from studio.domain.content.model.content import BlogPost, ContentBase, Gradient, Project
from studio.domain.shared.error import ValidationError

HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


def content_errors(item: ContentBase) -> dict[str, str]:
    """Collect per-field problems; empty when the item is valid."""
    errors: dict[str, str] = {}

    if isinstance(item, (Project, BlogPost)):
        if not item.title.strip():
            errors["title"] = "Title is required"
    if isinstance(item, Project):
        if not item.description.strip():
            errors["description"] = "Description is required"
    if isinstance(item, BlogPost):
        if not item.excerpt.strip():
            errors["excerpt"] = "Excerpt is required"
    if isinstance(item, Gradient):
        if not item.name.strip():
            errors["name"] = "Name is required"
        if len(item.colors) < 2:
            errors["colors"] = "A gradient needs at least two colors"
        else:
            for i, color in enumerate(item.colors):
                if not HEX_COLOR.match(color.hex):
                    errors[f"colors.{i}.hex"] = f"Invalid hex color: {color.hex}"
                if not 0 <= color.position <= 100:
                    errors[f"colors.{i}.position"] = "Position must be between 0 and 100"

    return errors


def validate_content(item: ContentBase) -> None:
    errors = content_errors(item)
    if errors:
        raise ValidationError(f"Invalid {item.content_type.value}", errors=errors)
