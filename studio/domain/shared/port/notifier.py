"""Port for user-facing notifications (toasts)."""

from abc import abstractmethod
from typing import Protocol

from studio.domain.shared.port import Port


class Notifier(Port, Protocol):
    @abstractmethod
    def success(self, message: str) -> None: ...

    @abstractmethod
    def error(self, message: str) -> None: ...

    @abstractmethod
    def info(self, message: str) -> None: ...
