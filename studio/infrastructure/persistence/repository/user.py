from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from studio.domain.auth.model.user import User
from studio.domain.auth.model.value import UserId
from studio.domain.auth.port.user_repository import UserRepository
from studio.infrastructure.persistence.mappers.auth import row_to_user, user_to_dict
from studio.infrastructure.persistence.tables import users_table


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, user: User) -> None:
        values = user_to_dict(user)

        existing = await self.get(user.id)

        if existing:
            stmt = update(users_table).where(users_table.c.id == str(user.id)).values(**values)
        else:
            stmt = insert(users_table).values(**values)

        await self.session.execute(stmt)
        await self.session.flush()

    async def get(self, user_id: UserId) -> User | None:
        stmt = select(users_table).where(users_table.c.id == str(user_id))
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None
