"""Composable policy types for handler-level authorization gates."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from studio.domain.auth.model.identity import Viewer
    from studio.domain.auth.model.role import Role


class Policy(ABC):
    """Base class for composable authorization policies.

    Policies are evaluated at the handler level as a coarse pre-filter
    (viewer check only, no resource loaded yet).
    """

    @abstractmethod
    def evaluate(self, viewer: "Viewer") -> bool:
        """Return True if viewer satisfies this policy."""
        ...

    def __and__(self, other: Policy) -> AllOf:
        return AllOf(policies=(self, other))

    def __or__(self, other: Policy) -> AnyOf:
        return AnyOf(policies=(self, other))

    def __invert__(self) -> Not:
        return Not(policy=self)


@dataclass(frozen=True)
class SignedIn(Policy):
    """Any signed-in identity, including a local signup."""

    def evaluate(self, viewer: "Viewer") -> bool:
        return viewer.is_authenticated


@dataclass(frozen=True)
class RequiresRole(Policy):
    """Policy that checks a real user has at least the given role (hierarchy)."""

    role: "Role"

    def evaluate(self, viewer: "Viewer") -> bool:
        from studio.domain.auth.model.identity import Principal

        return isinstance(viewer, Principal) and viewer.has_role(self.role)


@dataclass(frozen=True)
class AllOf(Policy):
    """Policy that requires ALL sub-policies to pass."""

    policies: tuple[Policy, ...]

    def evaluate(self, viewer: "Viewer") -> bool:
        return all(p.evaluate(viewer) for p in self.policies)


@dataclass(frozen=True)
class AnyOf(Policy):
    """Policy that requires at least ONE sub-policy to pass."""

    policies: tuple[Policy, ...]

    def evaluate(self, viewer: "Viewer") -> bool:
        return any(p.evaluate(viewer) for p in self.policies)


@dataclass(frozen=True)
class Not(Policy):
    """Policy that inverts another policy."""

    policy: Policy

    def evaluate(self, viewer: "Viewer") -> bool:
        return not self.policy.evaluate(viewer)


def signed_in() -> SignedIn:
    return SignedIn()


def requires_role(role: "Role") -> RequiresRole:
    """Factory: policy requiring at least the given role."""
    return RequiresRole(role=role)


def requires_any_role(*roles: "Role") -> AnyOf:
    """Factory: policy requiring at least one of the given roles."""
    return AnyOf(policies=tuple(RequiresRole(role=r) for r in roles))
