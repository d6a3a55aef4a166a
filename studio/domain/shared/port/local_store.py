"""Port for the client-side key/value store (browser storage equivalent)."""

from abc import abstractmethod
from typing import Any, Protocol

from studio.domain.shared.port import Port


class LocalStore(Port, Protocol):
    """Synchronous, fallible JSON blob store keyed by string.

    Values must be JSON-serializable. An absent key reads as ``None``, which
    callers treat as an empty collection.
    """

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the decoded value stored under key, or None."""
        ...

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store value under key. Raises StorageQuotaError when the write is rejected."""
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete key. Removing an absent key is a no-op."""
        ...

    @abstractmethod
    def keys(self) -> list[str]:
        """List stored keys."""
        ...
