from typing import Dict, Optional


class InMemoryKeyValueStore:
    """Process-local store. Nothing survives a restart."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, blob: str) -> None:
        self._data[key] = blob
