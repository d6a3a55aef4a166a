"""Global test fixtures."""

from datetime import UTC, datetime

import pytest

from studio.domain.auth.model.identity import LocalMember, Principal
from studio.domain.auth.model.role import Role
from studio.domain.auth.model.signup import SignupForm
from studio.domain.auth.model.user import User
from studio.domain.auth.model.value import UserId
from studio.domain.content.model.defaults import default_catalog
from studio.infrastructure.local.memory import InMemoryLocalStore
from studio.infrastructure.notify.logging import LoggingNotifier


def make_user(user_id: str = "user-1", role: Role = Role.SUBSCRIBER) -> User:
    return User(
        id=UserId(user_id),
        email=f"{user_id}@example.com",
        name=f"User {user_id}",
        role=role,
        created_at=datetime.now(UTC),
    )


def make_principal(role: Role = Role.SUBSCRIBER, user_id: str = "user-1") -> Principal:
    return Principal(user=make_user(user_id, role))


def make_signup(**overrides) -> SignupForm:
    data = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email": "ada@example.com",
        "interests": ["ux-design"],
        "primary_goal": "learn",
        "role": "designer",
        "experience": "senior",
        "challenges": ["research"],
    }
    data.update(overrides)
    return SignupForm(**data)


def make_local_member() -> LocalMember:
    return LocalMember(signup=make_signup())


@pytest.fixture
def local_store() -> InMemoryLocalStore:
    return InMemoryLocalStore()


@pytest.fixture
def notifier() -> LoggingNotifier:
    return LoggingNotifier()


@pytest.fixture
def catalog():
    return default_catalog()
