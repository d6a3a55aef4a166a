"""Repository port for User profiles."""

from abc import abstractmethod
from typing import Protocol

from studio.domain.auth.model.user import User
from studio.domain.auth.model.value import UserId
from studio.domain.shared.port import Port


class UserRepository(Port, Protocol):
    @abstractmethod
    async def get(self, user_id: UserId) -> User | None:
        ...

    @abstractmethod
    async def save(self, user: User) -> None:
        """Insert or update a user profile."""
        ...
