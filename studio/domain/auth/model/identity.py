"""Viewer hierarchy: who is looking at the site right now."""

from dataclasses import dataclass

from studio.domain.auth.model.role import Capabilities, Role, capabilities_of
from studio.domain.auth.model.signup import SignupForm
from studio.domain.auth.model.user import User
from studio.domain.auth.model.value import UserId


@dataclass(frozen=True)
class Viewer:
    """Base for all viewers."""

    @property
    def is_authenticated(self) -> bool:
        return False

    @property
    def viewer_id(self) -> str | None:
        """Stable id for per-viewer data; None for anonymous and local members."""
        return None


@dataclass(frozen=True)
class Anonymous(Viewer):
    """Visitor with no identity."""

    pass


@dataclass(frozen=True)
class LocalMember(Viewer):
    """Visitor who completed the local signup but holds no account.

    Counts as signed in for private content; can never edit.
    """

    signup: SignupForm

    @property
    def is_authenticated(self) -> bool:
        return True


@dataclass(frozen=True)
class Principal(Viewer):
    """A real authenticated user. Takes priority over any local signup."""

    user: User

    @property
    def is_authenticated(self) -> bool:
        return True

    @property
    def viewer_id(self) -> str | None:
        return str(self.user.id)

    @property
    def user_id(self) -> UserId:
        return self.user.id

    @property
    def role(self) -> Role:
        return self.user.role

    @property
    def capabilities(self) -> Capabilities:
        return capabilities_of(self.user.role)

    def has_role(self, role: Role) -> bool:
        """Check the user's role >= the given role (hierarchy comparison)."""
        return self.user.role >= role


ANONYMOUS = Anonymous()


def resolve_viewer(auth_user: User | None, local_signup: SignupForm | None) -> Viewer:
    """Single point of precedence: real user, then local signup, then anonymous."""
    if auth_user is not None:
        return Principal(user=auth_user)
    if local_signup is not None:
        return LocalMember(signup=local_signup)
    return ANONYMOUS
