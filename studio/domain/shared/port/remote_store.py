"""Ports for the remote database and its auth provider."""

from abc import abstractmethod
from typing import Any, Protocol

from studio.domain.auth.model.user import User
from studio.domain.shared.model.value import ValueObject
from studio.domain.shared.port import Port


class RemoteError(ValueObject):
    """Error returned (not raised) by a remote store operation."""

    message: str
    code: str | None = None


class RemoteResponse(ValueObject):
    """Result of a remote read: rows on success, error otherwise."""

    data: list[dict[str, Any]] = []
    error: RemoteError | None = None


class RemoteStore(Port, Protocol):
    """Table-like remote store (projects, blog_posts, gradients, favorites)."""

    @abstractmethod
    async def upsert(
        self,
        table: str,
        rows: list[dict[str, Any]],
        on_conflict: str = "id",
    ) -> RemoteError | None:
        """Insert or update rows keyed by the on_conflict column list.

        on_conflict is a comma-separated column list. Returns None on success.
        """
        ...

    @abstractmethod
    async def select(
        self,
        table: str,
        filters: dict[str, Any],
        limit: int | None = None,
    ) -> RemoteResponse:
        """Read rows whose columns equal every filter value."""
        ...


class AuthProvider(Port, Protocol):
    """Source of the remote store's notion of the current viewer."""

    @abstractmethod
    def sign_in(self, user: User) -> None:
        """Start a session for an authenticated user."""
        ...

    @abstractmethod
    def sign_out(self) -> None:
        ...

    @abstractmethod
    async def current_viewer_id(self) -> str | None:
        """Id of the authenticated viewer, or None."""
        ...

    @abstractmethod
    async def is_authenticated(self) -> bool:
        ...
