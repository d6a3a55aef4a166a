"""User entity for the auth domain."""

from datetime import UTC, datetime
from typing import Literal

from pydantic import field_validator

from studio.domain.auth.model.role import Role
from studio.domain.auth.model.value import UserId
from studio.domain.shared.model.entity import Entity

UserStatus = Literal["active", "inactive", "pending"]


class User(Entity):
    """An authenticated account.

    Invariants:
    - `id` is immutable after creation
    - `role` defaults to subscriber and only changes through an approved RoleRequest
    """

    id: UserId
    email: str
    name: str
    role: Role = Role.SUBSCRIBER
    avatar: str | None = None
    status: UserStatus = "active"
    created_at: datetime
    updated_at: datetime | None = None

    @field_validator("role", mode="before")
    @classmethod
    def parse_role(cls, v: object) -> Role:
        # Strict boundary parse; pydantic would otherwise accept raw ints.
        if isinstance(v, Role):
            return v
        if isinstance(v, str) and v.strip().upper() in Role.__members__:
            return Role[v.strip().upper()]
        raise ValueError(f"Unknown role: {v!r}")

    @classmethod
    def create(
        cls,
        id: str,
        email: str,
        name: str,
        avatar: str | None = None,
    ) -> "User":
        return cls(
            id=UserId(id),
            email=email,
            name=name,
            avatar=avatar,
            created_at=datetime.now(UTC),
        )

    def elevate(self, role: Role) -> None:
        """Raise the user's role. Roles never auto-decrease."""
        if role <= self.role:
            return
        self.role = role
        self.updated_at = datetime.now(UTC)
