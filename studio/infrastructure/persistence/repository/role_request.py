from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from studio.domain.auth.model.role_request import RoleRequest, RoleRequestStatus
from studio.domain.auth.model.value import RoleRequestId, UserId
from studio.domain.auth.port.role_request_repository import RoleRequestRepository
from studio.infrastructure.persistence.mappers.auth import (
    role_request_to_dict,
    row_to_role_request,
)
from studio.infrastructure.persistence.tables import role_requests_table


class SqlAlchemyRoleRequestRepository(RoleRequestRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, request: RoleRequest) -> None:
        values = role_request_to_dict(request)

        existing = await self.get(request.id)

        if existing:
            stmt = (
                update(role_requests_table)
                .where(role_requests_table.c.id == str(request.id))
                .values(**values)
            )
        else:
            stmt = insert(role_requests_table).values(**values)

        await self.session.execute(stmt)
        await self.session.flush()

    async def get(self, request_id: RoleRequestId) -> RoleRequest | None:
        stmt = select(role_requests_table).where(role_requests_table.c.id == str(request_id))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_role_request(dict(row)) if row else None

    async def list_pending(self) -> list[RoleRequest]:
        stmt = (
            select(role_requests_table)
            .where(role_requests_table.c.status == RoleRequestStatus.PENDING.value)
            .order_by(role_requests_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_role_request(dict(row)) for row in result.mappings()]

    async def list_for_user(self, user_id: UserId) -> list[RoleRequest]:
        stmt = (
            select(role_requests_table)
            .where(role_requests_table.c.user_id == str(user_id))
            .order_by(role_requests_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_role_request(dict(row)) for row in result.mappings()]
