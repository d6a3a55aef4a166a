from studio.domain.auth.model.user import User
from studio.domain.shared.port.remote_store import AuthProvider


class SessionAuthProvider(AuthProvider):
    """Holds the user signed in to the remote store for this session."""

    def __init__(self, user: User | None = None) -> None:
        self._user = user

    @property
    def user(self) -> User | None:
        return self._user

    def sign_in(self, user: User) -> None:
        self._user = user

    def sign_out(self) -> None:
        self._user = None

    async def current_viewer_id(self) -> str | None:
        return str(self._user.id) if self._user else None

    async def is_authenticated(self) -> bool:
        return self._user is not None
