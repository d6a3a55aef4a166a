"""Role hierarchy and the capabilities derived from it."""

from dataclasses import dataclass
from enum import IntEnum

from studio.domain.shared.error import ValidationError


class Role(IntEnum):
    """Hierarchical roles with numeric ordering.

    Higher values inherit all capabilities of lower values.
    Gaps allow future role insertion without renumbering.
    """

    SUBSCRIBER = 10
    EDITOR = 20
    ADMIN = 30
    SUPER_ADMIN = 40

    @property
    def wire(self) -> str:
        """Serialized name, e.g. ``super_admin``."""
        return self.name.lower()

    @classmethod
    def parse(cls, value: "Role | str") -> "Role":
        """Parse a wire name. Unknown values are rejected, never downgraded."""
        if isinstance(value, Role):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise ValidationError(f"Unknown role: {value!r}", field="role")


@dataclass(frozen=True)
class Capabilities:
    can_edit: bool
    can_manage_users: bool
    can_manage_content: bool
    can_view_private: bool
    can_delete_content: bool


def capabilities_of(role: Role) -> Capabilities:
    """Capability set implied by a role's rank."""
    return Capabilities(
        can_edit=role >= Role.EDITOR,
        can_manage_users=role >= Role.ADMIN,
        can_manage_content=role >= Role.EDITOR,
        can_view_private=True,
        can_delete_content=role >= Role.ADMIN,
    )


@dataclass(frozen=True)
class RoleDisplay:
    name: str
    description: str
    color: str


ROLE_DISPLAY: dict[Role, RoleDisplay] = {
    Role.SUBSCRIBER: RoleDisplay(
        "Subscriber", "Access to all content and community features", "blue"
    ),
    Role.EDITOR: RoleDisplay("Editor", "Can create and edit content", "green"),
    Role.ADMIN: RoleDisplay("Admin", "Can manage users and all content", "orange"),
    Role.SUPER_ADMIN: RoleDisplay("Super Admin", "Full system access and control", "red"),
}


def available_upgrades(current: Role) -> list[Role]:
    """Roles strictly above current, lowest first."""
    return [r for r in Role if r > current]


def can_request_role(current: Role, requested: Role) -> bool:
    return requested in available_upgrades(current)
