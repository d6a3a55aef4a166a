import json
import logging
import os
import tempfile
from pathlib import Path

from studio.domain.shared.error import StorageQuotaError
from studio.infrastructure.local.base import BlobLocalStore

logger = logging.getLogger(__name__)


class JsonFileLocalStore(BlobLocalStore):
    """Local store persisted as one JSON object of key -> JSON text.

    Writes go to a temp file in the same directory and are renamed into
    place, so a crash never leaves a half-written store behind.
    """

    def __init__(self, path: str | Path, quota_bytes: int = 0) -> None:
        self.path = Path(path).expanduser()
        super().__init__(quota_bytes, self._read())

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Local store %s unreadable, starting empty: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.error("Local store %s is not a JSON object, starting empty", self.path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _flush(self, blobs: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(blobs, f)
                os.replace(tmp_name, self.path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageQuotaError(f"Could not write local store {self.path}: {e}") from e
