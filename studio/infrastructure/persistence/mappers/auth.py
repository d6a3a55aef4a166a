from typing import Any

from studio.domain.auth.model.role import Role
from studio.domain.auth.model.role_request import RoleRequest, RoleRequestStatus
from studio.domain.auth.model.user import User
from studio.domain.auth.model.value import RoleRequestId, UserId


def row_to_user(row: dict[str, Any]) -> User:
    return User(
        id=UserId(row["id"]),
        email=row["email"],
        name=row["name"],
        role=row["role"],
        avatar=row.get("avatar"),
        status=row["status"],
        created_at=row["created_at"],
        updated_at=row.get("updated_at"),
    )


def user_to_dict(user: User) -> dict[str, Any]:
    return {
        "id": str(user.id),
        "email": user.email,
        "name": user.name,
        "role": user.role.wire,
        "avatar": user.avatar,
        "status": user.status,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_role_request(row: dict[str, Any]) -> RoleRequest:
    reviewed_by = row.get("reviewed_by")
    return RoleRequest(
        id=RoleRequestId(row["id"]),
        user_id=UserId(row["user_id"]),
        requested_role=Role.parse(row["requested_role"]),
        current_role=Role.parse(row["current_role"]),
        reason=row.get("reason") or "",
        status=RoleRequestStatus(row["status"]),
        reviewed_by=UserId(reviewed_by) if reviewed_by else None,
        reviewed_at=row.get("reviewed_at"),
        created_at=row["created_at"],
    )


def role_request_to_dict(request: RoleRequest) -> dict[str, Any]:
    return {
        "id": str(request.id),
        "user_id": str(request.user_id),
        "requested_role": request.requested_role.wire,
        "current_role": request.current_role.wire,
        "reason": request.reason,
        "status": request.status.value,
        "reviewed_by": str(request.reviewed_by) if request.reviewed_by else None,
        "reviewed_at": request.reviewed_at,
        "created_at": request.created_at,
    }
