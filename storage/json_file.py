"""Key-value store backed by a single JSON file on local disk.

The file holds one object mapping keys to blobs. Writes go to a temp file
that replaces the old file, so a crash mid-write leaves the old contents.
"""

import asyncio
import json
import logging
import threading
from pathlib import Path
from typing import Dict, Optional, Union

from storage.exceptions import StorageError

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore:
    """Async key-value store over a JSON file; file I/O runs in a worker thread."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()
        self._lock = threading.Lock()

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        with self.path.open(encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"{self.path} does not contain a JSON object")
        return data

    def _write(self, key: str, blob: str) -> None:
        with self._lock:
            try:
                data = self._read_all()
            except ValueError as exc:
                # Unreadable contents are replaced by this write
                logger.warning("Overwriting unreadable %s: %s", self.path, exc)
                data = {}
            data[key] = blob
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_name(self.path.name + ".tmp")
            tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
            tmp_path.replace(self.path)

    async def get(self, key: str) -> Optional[str]:
        try:
            data = await asyncio.to_thread(self._read_all)
        except (OSError, ValueError) as exc:
            raise StorageError(f"Could not read {self.path}: {exc}") from exc
        return data.get(key)

    async def set(self, key: str, blob: str) -> None:
        try:
            await asyncio.to_thread(self._write, key, blob)
        except (OSError, ValueError) as exc:
            raise StorageError(f"Could not write {self.path}: {exc}") from exc
