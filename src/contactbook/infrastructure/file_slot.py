"""File-backed implementation of ContactSlot: one JSON file per key."""

import logging
import os
import tempfile
from pathlib import Path

from contactbook.domain import PersistenceError

logger = logging.getLogger(__name__)


class FileSlot:
    """Stores each key as <directory>/<key>.json. Writes go through an fsynced temp file and os.replace."""

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory).expanduser()

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, key: str) -> Path:
        key = (key or "").strip()
        if not key:
            raise ValueError("Slot key must be non-empty.")
        if "/" in key or "\\" in key or key in (".", ".."):
            raise ValueError(f"Slot key must not contain path separators: {key!r}")
        return self._directory / f"{key}.json"

    def read(self, key: str) -> bytes | None:
        path = self.path_for(key)
        try:
            return path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise PersistenceError(f"Could not read {path}: {exc}") from exc

    def write(self, key: str, data: bytes) -> None:
        path = self.path_for(key)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self._directory, suffix=".tmp")
        except OSError as exc:
            raise PersistenceError(f"Could not write {path}: {exc}") from exc
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, path)
        except BaseException as exc:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            if isinstance(exc, OSError):
                raise PersistenceError(f"Could not write {path}: {exc}") from exc
            raise
        logger.debug("Wrote %d bytes to %s", len(data), path)
