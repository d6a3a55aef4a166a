"""Tests for role requests: entity transitions, service rules and handlers."""

from unittest.mock import AsyncMock

import pytest
from conftest import make_local_member, make_principal, make_user

from studio.domain.auth.command.role_request import (
    RequestRoleUpgrade,
    RequestRoleUpgradeHandler,
    ReviewRoleRequest,
    ReviewRoleRequestHandler,
)
from studio.domain.auth.model.identity import ANONYMOUS
from studio.domain.auth.model.role import Role
from studio.domain.auth.model.role_request import RoleRequest, RoleRequestStatus
from studio.domain.auth.model.value import UserId
from studio.domain.auth.service.role_request import RoleRequestService
from studio.domain.shared.error import (
    AuthorizationError,
    ConflictError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)


def _make_request(user_id: str = "user-1", requested: Role = Role.EDITOR) -> RoleRequest:
    return RoleRequest.create(
        user_id=UserId(user_id),
        requested_role=requested,
        current_role=Role.SUBSCRIBER,
        reason="I write case studies",
    )


def _make_service(request_repo=None, user_repo=None) -> RoleRequestService:
    if request_repo is None:
        request_repo = AsyncMock()
        request_repo.list_for_user.return_value = []
    return RoleRequestService(
        _request_repo=request_repo,
        _user_repo=user_repo or AsyncMock(),
    )


class TestRoleRequestEntity:
    def test_create_is_pending(self) -> None:
        request = _make_request()
        assert request.is_pending
        assert request.reviewed_by is None
        assert request.reviewed_at is None

    def test_approve_sets_reviewer(self) -> None:
        request = _make_request()
        request.approve(UserId("admin-1"))
        assert request.status == RoleRequestStatus.APPROVED
        assert request.reviewed_by == UserId("admin-1")
        assert request.reviewed_at is not None

    def test_deny_is_terminal(self) -> None:
        request = _make_request()
        request.deny(UserId("admin-1"))
        with pytest.raises(InvalidStateError) as exc_info:
            request.approve(UserId("admin-1"))
        assert exc_info.value.code == "role_request_reviewed"
        assert request.status == RoleRequestStatus.DENIED


class TestRoleRequestService:
    @pytest.mark.asyncio
    async def test_request_upgrade_saves_pending_request(self) -> None:
        service = _make_service()
        request = await service.request_upgrade(make_principal(Role.SUBSCRIBER), Role.EDITOR, "pls")

        assert request.is_pending
        assert request.current_role is Role.SUBSCRIBER
        service._request_repo.save.assert_awaited_once_with(request)

    @pytest.mark.asyncio
    async def test_request_for_non_upgrade_rejected(self) -> None:
        service = _make_service()
        with pytest.raises(ValidationError):
            await service.request_upgrade(make_principal(Role.ADMIN), Role.EDITOR)
        service._request_repo.save.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_second_pending_request_conflicts(self) -> None:
        repo = AsyncMock()
        repo.list_for_user.return_value = [_make_request()]
        service = _make_service(request_repo=repo)

        with pytest.raises(ConflictError) as exc_info:
            await service.request_upgrade(make_principal(), Role.ADMIN)
        assert exc_info.value.code == "role_request_pending"

    @pytest.mark.asyncio
    async def test_approve_elevates_user(self) -> None:
        request = _make_request(requested=Role.EDITOR)
        user = make_user("user-1", Role.SUBSCRIBER)
        request_repo, user_repo = AsyncMock(), AsyncMock()
        request_repo.get.return_value = request
        user_repo.get.return_value = user
        service = _make_service(request_repo, user_repo)

        result = await service.approve(request.id, make_principal(Role.ADMIN, "admin-1"))

        assert result.status == RoleRequestStatus.APPROVED
        assert user.role is Role.EDITOR
        user_repo.save.assert_awaited_once_with(user)
        request_repo.save.assert_awaited_once_with(request)

    @pytest.mark.asyncio
    async def test_editor_cannot_review(self) -> None:
        service = _make_service()
        with pytest.raises(AuthorizationError):
            await service.deny(_make_request().id, make_principal(Role.EDITOR))

    @pytest.mark.asyncio
    async def test_missing_request_not_found(self) -> None:
        request_repo = AsyncMock()
        request_repo.get.return_value = None
        service = _make_service(request_repo)
        with pytest.raises(NotFoundError):
            await service.approve(_make_request().id, make_principal(Role.ADMIN))

    @pytest.mark.asyncio
    async def test_deny_leaves_role_unchanged(self) -> None:
        request = _make_request()
        request_repo, user_repo = AsyncMock(), AsyncMock()
        request_repo.get.return_value = request
        service = _make_service(request_repo, user_repo)

        result = await service.deny(request.id, make_principal(Role.SUPER_ADMIN, "root"))

        assert result.status == RoleRequestStatus.DENIED
        user_repo.save.assert_not_awaited()


class TestRoleRequestHandlers:
    @pytest.mark.asyncio
    async def test_subscriber_can_request(self) -> None:
        handler = RequestRoleUpgradeHandler(viewer=make_principal(), role_request_service=_make_service())
        result = await handler.run(RequestRoleUpgrade(requested_role="editor", reason="portfolio"))
        assert result.requested_role == "editor"
        assert result.current_role == "subscriber"
        assert result.status == "pending"

    @pytest.mark.asyncio
    async def test_unknown_role_name_rejected(self) -> None:
        handler = RequestRoleUpgradeHandler(viewer=make_principal(), role_request_service=_make_service())
        with pytest.raises(ValidationError):
            await handler.run(RequestRoleUpgrade(requested_role="owner"))

    @pytest.mark.asyncio
    async def test_anonymous_missing_identity(self) -> None:
        handler = RequestRoleUpgradeHandler(viewer=ANONYMOUS, role_request_service=_make_service())
        with pytest.raises(AuthorizationError) as exc_info:
            await handler.run(RequestRoleUpgrade(requested_role="editor"))
        assert exc_info.value.code == "missing_identity"

    @pytest.mark.asyncio
    async def test_local_member_cannot_request(self) -> None:
        handler = RequestRoleUpgradeHandler(
            viewer=make_local_member(), role_request_service=_make_service()
        )
        with pytest.raises(AuthorizationError) as exc_info:
            await handler.run(RequestRoleUpgrade(requested_role="editor"))
        assert exc_info.value.code == "access_denied"

    @pytest.mark.asyncio
    async def test_review_requires_admin(self) -> None:
        handler = ReviewRoleRequestHandler(
            viewer=make_principal(Role.EDITOR), role_request_service=_make_service()
        )
        with pytest.raises(AuthorizationError) as exc_info:
            await handler.run(ReviewRoleRequest(request_id="r-1", decision="approve"))
        assert exc_info.value.code == "access_denied"

    @pytest.mark.asyncio
    async def test_admin_denies(self) -> None:
        request = _make_request()
        request_repo = AsyncMock()
        request_repo.get.return_value = request
        handler = ReviewRoleRequestHandler(
            viewer=make_principal(Role.ADMIN, "admin-1"),
            role_request_service=_make_service(request_repo),
        )
        result = await handler.run(ReviewRoleRequest(request_id=str(request.id), decision="deny"))
        assert result.status == "denied"
        assert result.reviewed_by == "admin-1"
