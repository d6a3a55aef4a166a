"""Command and CommandHandler base classes with authorization gate."""

import logging
from abc import ABCMeta, abstractmethod
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from functools import wraps
from typing import Any, ClassVar, Generic, TypeVar, dataclass_transform

from pydantic import BaseModel

logger = logging.getLogger("studio.authz")


class Command(BaseModel):
    __public__: ClassVar[bool] = False


class Result(BaseModel): ...


C = TypeVar("C", bound=Command)
R = TypeVar("R", bound=Result)

# Unbound async handler method: (self, cmd) -> Coroutine -> Result
_HandlerMethod = Callable[..., Coroutine[Any, Any, Any]]


def _wrap_run_with_auth(cls: type, original_run: _HandlerMethod) -> _HandlerMethod:
    """Wrap the run() method with __auth__ policy evaluation."""

    @wraps(original_run)
    async def auth_wrapped_run(self: Any, cmd: Any) -> Any:
        from studio.domain.shared.error import AuthorizationError, ConfigurationError

        if getattr(type(cmd), "__public__", False):
            return await original_run(self, cmd)

        auth_policy = getattr(type(self), "__auth__", None)
        if auth_policy is None:
            raise ConfigurationError(
                f"Handler {type(self).__name__} has no __auth__ declaration "
                f"and its command is not __public__"
            )

        viewer = getattr(self, "viewer", None)
        if viewer is None or not viewer.is_authenticated:
            raise AuthorizationError("Authentication required", code="missing_identity")

        if not auth_policy.evaluate(viewer):
            logger.warning(
                "Authorization denied: viewer=%s handler=%s",
                viewer.viewer_id or "local",
                type(self).__name__,
            )
            raise AuthorizationError(
                f"Access denied: insufficient role for {type(self).__name__}",
                code="access_denied",
            )

        logger.info(
            "Authorization allowed: viewer=%s handler=%s",
            viewer.viewer_id or "local",
            type(self).__name__,
        )
        return await original_run(self, cmd)

    return auth_wrapped_run


@dataclass_transform()
class _CommandHandlerMeta(ABCMeta):
    """Metaclass that combines ABC with auto-dataclass and __auth__ gate for subclasses."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            cls = dataclass(cls)

            original_run = cls.__dict__.get("run")
            if original_run is not None:
                cls.run = _wrap_run_with_auth(cls, original_run)

        return cls


class CommandHandler(Generic[C, R], metaclass=_CommandHandlerMeta):
    """Base class for command handlers. Subclasses are automatically dataclasses.

    Declare __auth__ to enforce viewer-based access:
        class MyHandler(CommandHandler[MyCmd, MyResult]):
            __auth__ = requires_role(Role.EDITOR)
            viewer: Viewer
    """

    @abstractmethod
    async def run(self, cmd: C) -> R: ...
