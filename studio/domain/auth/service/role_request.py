"""Role request service: upgrade requests and their review."""

import logging

from studio.domain.auth.model.identity import Principal
from studio.domain.auth.model.role import Role, can_request_role
from studio.domain.auth.model.role_request import RoleRequest
from studio.domain.auth.model.value import RoleRequestId
from studio.domain.auth.port.role_request_repository import RoleRequestRepository
from studio.domain.auth.port.user_repository import UserRepository
from studio.domain.shared.error import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from studio.domain.shared.service import Service

logger = logging.getLogger(__name__)


class RoleRequestService(Service):
    """Manages role upgrade requests."""

    _request_repo: RoleRequestRepository
    _user_repo: UserRepository

    async def request_upgrade(
        self,
        requester: Principal,
        requested_role: Role,
        reason: str = "",
    ) -> RoleRequest:
        if not can_request_role(requester.role, requested_role):
            raise ValidationError(
                f"Cannot request {requested_role.wire} from {requester.role.wire}",
                field="requested_role",
            )

        existing = await self._request_repo.list_for_user(requester.user_id)
        if any(r.is_pending for r in existing):
            raise ConflictError(
                f"User {requester.user_id} already has a pending role request",
                code="role_request_pending",
            )

        request = RoleRequest.create(
            user_id=requester.user_id,
            requested_role=requested_role,
            current_role=requester.role,
            reason=reason,
        )
        await self._request_repo.save(request)
        logger.info(
            "Role request created: user=%s requested=%s",
            requester.user_id,
            requested_role.wire,
        )
        return request

    async def approve(self, request_id: RoleRequestId, reviewer: Principal) -> RoleRequest:
        request = await self._load_for_review(request_id, reviewer)
        user = await self._user_repo.get(request.user_id)
        if user is None:
            raise NotFoundError(f"User not found: {request.user_id}", code="user_not_found")

        request.approve(reviewer.user_id)
        user.elevate(request.requested_role)
        await self._user_repo.save(user)
        await self._request_repo.save(request)
        logger.info(
            "Role request approved: user=%s role=%s reviewer=%s",
            request.user_id,
            request.requested_role.wire,
            reviewer.user_id,
        )
        return request

    async def deny(self, request_id: RoleRequestId, reviewer: Principal) -> RoleRequest:
        request = await self._load_for_review(request_id, reviewer)
        request.deny(reviewer.user_id)
        await self._request_repo.save(request)
        logger.info("Role request denied: id=%s reviewer=%s", request_id, reviewer.user_id)
        return request

    async def list_pending(self) -> list[RoleRequest]:
        return await self._request_repo.list_pending()

    async def _load_for_review(
        self, request_id: RoleRequestId, reviewer: Principal
    ) -> RoleRequest:
        if not reviewer.capabilities.can_manage_users:
            raise AuthorizationError("Unauthorized", code="access_denied")
        request = await self._request_repo.get(request_id)
        if request is None:
            raise NotFoundError(
                f"Role request not found: {request_id}", code="role_request_not_found"
            )
        return request
