"""Migration run state and outcome."""

from enum import StrEnum

from pydantic import BaseModel, Field


class MigrationState(StrEnum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    COMPLETED_WITH_ERRORS = "completed_with_errors"
    SKIPPED = "skipped"


class Collection(StrEnum):
    """Local collections, in the order they are migrated."""

    GRADIENTS = "gradients"
    FAVORITES = "favorites"
    PROJECTS = "projects"
    POSTS = "posts"

    @property
    def display_name(self) -> str:
        return "Blog posts" if self is Collection.POSTS else self.value.capitalize()


class MigratedItems(BaseModel):
    gradients: int = 0
    favorites: int = 0
    projects: int = 0
    posts: int = 0

    @property
    def total(self) -> int:
        return self.gradients + self.favorites + self.projects + self.posts


class MigrationResult(BaseModel):
    state: MigrationState = MigrationState.NOT_STARTED
    migrated_items: MigratedItems = Field(default_factory=MigratedItems)
    errors: list[str] = []
    skipped: list[Collection] = []

    @property
    def success(self) -> bool:
        return self.state == MigrationState.COMPLETED and not self.errors

    def summary(self) -> str:
        counts = ", ".join(
            f"{getattr(self.migrated_items, c.value)} {c.value}" for c in Collection
        )
        if self.errors:
            return f"Migration completed with errors: {', '.join(self.errors)}"
        return f"Data migrated successfully to your account ({counts})"
