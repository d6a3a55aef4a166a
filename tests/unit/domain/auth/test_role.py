"""Tests for the role hierarchy and derived capabilities."""

import pytest

from studio.domain.auth.model.role import (
    ROLE_DISPLAY,
    Role,
    available_upgrades,
    can_request_role,
    capabilities_of,
)
from studio.domain.shared.error import ValidationError


class TestRoleOrdering:
    def test_hierarchy_is_total(self) -> None:
        assert Role.SUBSCRIBER < Role.EDITOR < Role.ADMIN < Role.SUPER_ADMIN

    def test_wire_names(self) -> None:
        assert [r.wire for r in Role] == ["subscriber", "editor", "admin", "super_admin"]


class TestRoleParse:
    def test_parses_wire_name(self) -> None:
        assert Role.parse("editor") is Role.EDITOR

    def test_parse_is_case_and_space_insensitive(self) -> None:
        assert Role.parse("  Super_Admin ") is Role.SUPER_ADMIN

    def test_role_passes_through(self) -> None:
        assert Role.parse(Role.ADMIN) is Role.ADMIN

    @pytest.mark.parametrize("value", ["owner", "", "premium", 30, None])
    def test_unknown_value_rejected(self, value) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Role.parse(value)
        assert exc_info.value.field == "role"


class TestCapabilities:
    def test_subscriber_only_views_private(self) -> None:
        caps = capabilities_of(Role.SUBSCRIBER)
        assert caps.can_view_private
        assert not caps.can_edit
        assert not caps.can_manage_content
        assert not caps.can_manage_users
        assert not caps.can_delete_content

    def test_editor_edits_and_manages_content(self) -> None:
        caps = capabilities_of(Role.EDITOR)
        assert caps.can_edit
        assert caps.can_manage_content
        assert not caps.can_manage_users
        assert not caps.can_delete_content

    @pytest.mark.parametrize("role", [Role.ADMIN, Role.SUPER_ADMIN])
    def test_admins_have_everything(self, role: Role) -> None:
        caps = capabilities_of(role)
        assert caps.can_edit
        assert caps.can_manage_users
        assert caps.can_manage_content
        assert caps.can_delete_content

    def test_capabilities_are_monotonic(self) -> None:
        roles = list(Role)
        for lower, higher in zip(roles, roles[1:]):
            low, high = capabilities_of(lower), capabilities_of(higher)
            for flag in vars(low):
                assert getattr(high, flag) >= getattr(low, flag)


class TestUpgrades:
    def test_available_upgrades_are_strictly_higher(self) -> None:
        assert available_upgrades(Role.SUBSCRIBER) == [Role.EDITOR, Role.ADMIN, Role.SUPER_ADMIN]
        assert available_upgrades(Role.SUPER_ADMIN) == []

    def test_cannot_request_same_or_lower(self) -> None:
        assert can_request_role(Role.EDITOR, Role.ADMIN)
        assert not can_request_role(Role.EDITOR, Role.EDITOR)
        assert not can_request_role(Role.ADMIN, Role.SUBSCRIBER)

    def test_every_role_has_display(self) -> None:
        assert set(ROLE_DISPLAY) == set(Role)
