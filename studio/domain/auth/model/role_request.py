"""RoleRequest entity: a user's request to be elevated to a higher role."""

from datetime import UTC, datetime
from enum import StrEnum

from studio.domain.auth.model.role import Role
from studio.domain.auth.model.value import RoleRequestId, UserId
from studio.domain.shared.error import InvalidStateError
from studio.domain.shared.model.entity import Entity


class RoleRequestStatus(StrEnum):
    PENDING = "pending"
    APPROVED = "approved"
    DENIED = "denied"


class RoleRequest(Entity):
    """Created by a user, reviewed exactly once by an admin-capable reviewer.

    Invariants:
    - status moves pending -> approved | denied, never back
    - reviewed_by/reviewed_at are set iff the request is terminal
    """

    id: RoleRequestId
    user_id: UserId
    requested_role: Role
    current_role: Role
    reason: str = ""
    status: RoleRequestStatus = RoleRequestStatus.PENDING
    reviewed_by: UserId | None = None
    reviewed_at: datetime | None = None
    created_at: datetime

    @classmethod
    def create(
        cls,
        user_id: UserId,
        requested_role: Role,
        current_role: Role,
        reason: str = "",
    ) -> "RoleRequest":
        return cls(
            id=RoleRequestId.generate(),
            user_id=user_id,
            requested_role=requested_role,
            current_role=current_role,
            reason=reason,
            created_at=datetime.now(UTC),
        )

    @property
    def is_pending(self) -> bool:
        return self.status == RoleRequestStatus.PENDING

    def approve(self, reviewer: UserId) -> None:
        self._review(RoleRequestStatus.APPROVED, reviewer)

    def deny(self, reviewer: UserId) -> None:
        self._review(RoleRequestStatus.DENIED, reviewer)

    def _review(self, status: RoleRequestStatus, reviewer: UserId) -> None:
        if not self.is_pending:
            raise InvalidStateError(
                f"Role request {self.id} already {self.status}",
                code="role_request_reviewed",
            )
        self.status = status
        self.reviewed_by = reviewer
        self.reviewed_at = datetime.now(UTC)
