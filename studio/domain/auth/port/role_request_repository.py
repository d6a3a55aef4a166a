"""Repository port for RoleRequest persistence."""

from abc import abstractmethod
from typing import Protocol

from studio.domain.auth.model.role_request import RoleRequest
from studio.domain.auth.model.value import RoleRequestId, UserId
from studio.domain.shared.port import Port


class RoleRequestRepository(Port, Protocol):
    """Repository for RoleRequest entity persistence."""

    @abstractmethod
    async def get(self, request_id: RoleRequestId) -> RoleRequest | None:
        ...

    @abstractmethod
    async def save(self, request: RoleRequest) -> None:
        """Insert or update a role request."""
        ...

    @abstractmethod
    async def list_pending(self) -> list[RoleRequest]:
        """Pending requests, oldest first."""
        ...

    @abstractmethod
    async def list_for_user(self, user_id: UserId) -> list[RoleRequest]:
        ...
