"""RequestRoleUpgrade / ReviewRoleRequest commands and handlers."""

from datetime import datetime
from typing import Literal

from studio.domain.auth.model.identity import Principal, Viewer
from studio.domain.auth.model.role import Role
from studio.domain.auth.model.value import RoleRequestId
from studio.domain.auth.service.role_request import RoleRequestService
from studio.domain.shared.authorization.policy import requires_role
from studio.domain.shared.command import Command, CommandHandler, Result


class RequestRoleUpgrade(Command):
    requested_role: str  # Role wire name
    reason: str = ""


class ReviewRoleRequest(Command):
    request_id: str
    decision: Literal["approve", "deny"]


class RoleRequestResult(Result):
    id: str
    user_id: str
    requested_role: str
    current_role: str
    status: str
    reviewed_by: str | None = None
    reviewed_at: datetime | None = None
    created_at: datetime


def _to_result(request) -> RoleRequestResult:
    return RoleRequestResult(
        id=str(request.id),
        user_id=str(request.user_id),
        requested_role=request.requested_role.wire,
        current_role=request.current_role.wire,
        status=str(request.status),
        reviewed_by=str(request.reviewed_by) if request.reviewed_by else None,
        reviewed_at=request.reviewed_at,
        created_at=request.created_at,
    )


class RequestRoleUpgradeHandler(CommandHandler[RequestRoleUpgrade, RoleRequestResult]):
    __auth__ = requires_role(Role.SUBSCRIBER)
    viewer: Viewer
    role_request_service: RoleRequestService

    async def run(self, cmd: RequestRoleUpgrade) -> RoleRequestResult:
        assert isinstance(self.viewer, Principal)  # Guaranteed by __auth__ gate

        request = await self.role_request_service.request_upgrade(
            self.viewer,
            Role.parse(cmd.requested_role),
            cmd.reason,
        )
        return _to_result(request)


class ReviewRoleRequestHandler(CommandHandler[ReviewRoleRequest, RoleRequestResult]):
    __auth__ = requires_role(Role.ADMIN)
    viewer: Viewer
    role_request_service: RoleRequestService

    async def run(self, cmd: ReviewRoleRequest) -> RoleRequestResult:
        assert isinstance(self.viewer, Principal)  # Guaranteed by __auth__ gate

        request_id = RoleRequestId(cmd.request_id)
        if cmd.decision == "approve":
            request = await self.role_request_service.approve(request_id, self.viewer)
        else:
            request = await self.role_request_service.deny(request_id, self.viewer)
        return _to_result(request)
