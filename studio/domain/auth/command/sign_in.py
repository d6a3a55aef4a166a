"""SignIn command: starts a session and migrates local data to the account."""

from typing import ClassVar

import logfire

from studio.domain.auth.model.user import User
from studio.domain.auth.service.identity import IdentityService
from studio.domain.migration.model.result import MigrationResult
from studio.domain.migration.service.migration import MigrationEngine
from studio.domain.shared.command import Command, CommandHandler, Result
from studio.domain.shared.port.remote_store import AuthProvider


class SignIn(Command):
    """Sent once the auth provider has authenticated ``user``."""

    __public__: ClassVar[bool] = True

    user: User


class SignInResult(Result):
    user_id: str
    role: str
    migration: MigrationResult | None = None  # None when migration was skipped


class SignInHandler(CommandHandler[SignIn, SignInResult]):
    auth_provider: AuthProvider
    identity_service: IdentityService
    migration_engine: MigrationEngine

    async def run(self, cmd: SignIn) -> SignInResult:
        user_id = str(cmd.user.id)
        with logfire.span("SignIn"):
            self.auth_provider.sign_in(cmd.user)
            migration = await self.migration_engine.on_login(user_id)

            # The real user now wins; any local signup left behind is cleared.
            self.identity_service.current_viewer(cmd.user)

            logfire.info(
                "Signed in",
                user_id=user_id,
                migration=migration.state.value if migration else "skipped",
            )
            return SignInResult(
                user_id=user_id,
                role=cmd.user.role.wire,
                migration=migration,
            )
