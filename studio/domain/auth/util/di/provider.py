from dishka import Scope, provide

from studio.domain.auth.command.role_request import (
    RequestRoleUpgradeHandler,
    ReviewRoleRequestHandler,
)
from studio.domain.auth.command.sign_in import SignInHandler
from studio.domain.auth.model.identity import Viewer
from studio.domain.auth.service.identity import IdentityService
from studio.domain.auth.service.role_request import RoleRequestService
from studio.infrastructure.auth.session import SessionAuthProvider
from studio.util.di.base import ProviderBase


class AuthServiceProvider(ProviderBase):
    """DI provider for auth domain services and handlers."""

    identity_service = provide(IdentityService, scope=Scope.APP)
    role_request_service = provide(RoleRequestService, scope=Scope.REQUEST)

    # Command Handlers
    request_upgrade_handler = provide(RequestRoleUpgradeHandler, scope=Scope.REQUEST)
    review_request_handler = provide(ReviewRoleRequestHandler, scope=Scope.REQUEST)
    sign_in_handler = provide(SignInHandler, scope=Scope.REQUEST)

    @provide(scope=Scope.REQUEST)
    def get_viewer(self, identity: IdentityService, session: SessionAuthProvider) -> Viewer:
        """Resolve the viewer for this request: signed-in user, local signup or anonymous."""
        return identity.current_viewer(session.user)
