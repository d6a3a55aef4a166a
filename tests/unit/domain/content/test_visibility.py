"""Tests for the visibility classifier."""

import pytest
from conftest import make_local_member, make_principal

from studio.domain.auth.model.identity import ANONYMOUS
from studio.domain.auth.model.role import Role
from studio.domain.content.model.content import Project, Visibility
from studio.domain.content.service.visibility import (
    can_edit_item,
    filter_accessible,
    is_accessible,
    locked_count,
)

PUBLIC = Project(id="pub", title="Public")
PRIVATE = Project(id="priv", title="Private", visibility=Visibility.PRIVATE)


class TestIsAccessible:
    @pytest.mark.parametrize("viewer", [None, ANONYMOUS, make_local_member(), make_principal()])
    def test_public_is_open_to_everyone(self, viewer) -> None:
        assert is_accessible(PUBLIC, viewer)

    @pytest.mark.parametrize("viewer", [None, ANONYMOUS])
    def test_private_hidden_from_anonymous(self, viewer) -> None:
        assert not is_accessible(PRIVATE, viewer)

    def test_private_open_to_local_member(self) -> None:
        assert is_accessible(PRIVATE, make_local_member())

    def test_private_open_to_any_role(self) -> None:
        assert is_accessible(PRIVATE, make_principal(Role.SUBSCRIBER))


class TestCanEdit:
    def test_local_member_never_edits(self) -> None:
        assert not can_edit_item(PUBLIC, make_local_member())

    def test_subscriber_cannot_edit(self) -> None:
        assert not can_edit_item(PUBLIC, make_principal(Role.SUBSCRIBER))

    @pytest.mark.parametrize("role", [Role.EDITOR, Role.ADMIN, Role.SUPER_ADMIN])
    def test_editors_and_above_edit(self, role: Role) -> None:
        assert can_edit_item(PRIVATE, make_principal(role))

    def test_anonymous_cannot_edit(self) -> None:
        assert not can_edit_item(PUBLIC, None)


class TestFiltering:
    def test_filter_keeps_order(self) -> None:
        items = [PRIVATE, PUBLIC, PRIVATE]
        assert filter_accessible(items, ANONYMOUS) == [PUBLIC]
        assert filter_accessible(items, make_local_member()) == items

    def test_locked_count(self) -> None:
        items = [PRIVATE, PUBLIC, PRIVATE]
        assert locked_count(items, None) == 2
        assert locked_count(items, make_principal()) == 0
