"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.types import JSON

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# CONTENT TABLES (migration targets, keyed by the local item id)
# ============================================================================
projects_table = Table(
    "projects",
    metadata,
    Column("id", String, primary_key=True),
    Column("title", String, nullable=False),
    Column("description", Text, nullable=True),
    Column("category", String(128), nullable=True),
    Column("tags", JSON, nullable=True),
    Column("image_url", String, nullable=True),
    Column("is_featured", Boolean, nullable=False, default=False),
    Column("is_public", Boolean, nullable=False, default=True),
    Column("content", JSON, nullable=True),
    Column("created_by", String, nullable=True),
)

Index("idx_projects_created_by", projects_table.c.created_by)

blog_posts_table = Table(
    "blog_posts",
    metadata,
    Column("id", String, primary_key=True),
    Column("title", String, nullable=False),
    Column("slug", String, nullable=False),
    Column("excerpt", Text, nullable=True),
    Column("content", JSON, nullable=True),
    Column("image_url", String, nullable=True),
    Column("category", String(128), nullable=True),
    Column("tags", JSON, nullable=True),
    Column("is_featured", Boolean, nullable=False, default=False),
    Column("is_public", Boolean, nullable=False, default=True),
    Column("status", String(32), nullable=False),  # draft, published, archived
    Column("created_by", String, nullable=True),
)

Index("idx_blog_posts_created_by", blog_posts_table.c.created_by)

gradients_table = Table(
    "gradients",
    metadata,
    Column("id", String, primary_key=True),
    Column("name", String, nullable=False),
    Column("category", String(128), nullable=True),
    Column("tags", JSON, nullable=True),
    Column("colors", JSON, nullable=False),
    Column("direction", String(64), nullable=False),
    Column("css", Text, nullable=True),
    Column("is_custom", Boolean, nullable=False, default=False),
    Column("is_public", Boolean, nullable=False, default=True),
    Column("created_by", String, nullable=True),
)

Index("idx_gradients_created_by", gradients_table.c.created_by)


# ============================================================================
# FAVORITES TABLE (one row per viewer + item)
# ============================================================================
user_favorites_table = Table(
    "user_favorites",
    metadata,
    Column("user_id", String, primary_key=True),
    Column("content_id", String, primary_key=True),
    Column("content_type", String(32), primary_key=True),  # ContentType as string
    Column("metadata", JSON, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)


# ============================================================================
# USERS / ROLE REQUESTS
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String, primary_key=True),
    Column("email", String, nullable=False),
    Column("name", String, nullable=False),
    Column("role", String(32), nullable=False),  # Role wire name
    Column("avatar", String, nullable=True),
    Column("status", String(32), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=True),
)

role_requests_table = Table(
    "role_requests",
    metadata,
    Column("id", String, primary_key=True),
    Column("user_id", String, nullable=False),
    Column("requested_role", String(32), nullable=False),
    Column("current_role", String(32), nullable=False),
    Column("reason", Text, nullable=False),
    Column("status", String(32), nullable=False),  # pending, approved, denied
    Column("reviewed_by", String, nullable=True),
    Column("reviewed_at", DateTime(timezone=True), nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index("idx_role_requests_user_id", role_requests_table.c.user_id)
Index("idx_role_requests_status", role_requests_table.c.status)
