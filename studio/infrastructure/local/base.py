"""Shared blob bookkeeping for local store adapters."""

import json
import logging
from typing import Any

from studio.domain.shared.error import StorageQuotaError

logger = logging.getLogger(__name__)


class BlobLocalStore:
    """Key -> JSON text map with a byte quota, like browser localStorage.

    Subclasses persist ``self._blobs`` in ``_flush``.
    """

    def __init__(self, quota_bytes: int = 0, blobs: dict[str, str] | None = None) -> None:
        self.quota_bytes = quota_bytes
        self._blobs: dict[str, str] = dict(blobs or {})

    def get(self, key: str) -> Any | None:
        blob = self._blobs.get(key)
        if blob is None:
            return None
        try:
            return json.loads(blob)
        except json.JSONDecodeError:
            logger.error("Undecodable value under local key %r; treating as absent", key)
            return None

    def set(self, key: str, value: Any) -> None:
        try:
            blob = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise StorageQuotaError(f"Value for {key!r} is not storable: {e}") from e

        candidate = {**self._blobs, key: blob}
        used = self._size(candidate)
        if self.quota_bytes and used > self.quota_bytes:
            raise StorageQuotaError(
                f"Local storage quota exceeded writing {key!r} ({used} > {self.quota_bytes} bytes)"
            )
        self._flush(candidate)
        self._blobs = candidate

    def remove(self, key: str) -> None:
        if key not in self._blobs:
            return
        candidate = {k: v for k, v in self._blobs.items() if k != key}
        self._flush(candidate)
        self._blobs = candidate

    def keys(self) -> list[str]:
        return list(self._blobs)

    def used_bytes(self) -> int:
        return self._size(self._blobs)

    @staticmethod
    def _size(blobs: dict[str, str]) -> int:
        return sum(len(k.encode()) + len(v.encode()) for k, v in blobs.items())

    def _flush(self, blobs: dict[str, str]) -> None:
        """Persist the new blob map. Raise StorageQuotaError if it cannot be written."""
        pass
