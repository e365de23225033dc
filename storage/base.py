from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Interface for the async key-value slot a round is persisted in.

    Implementors raise StorageError when the backend fails.
    Any class with matching method signatures satisfies this protocol.
    """

    async def get(self, key: str) -> Optional[str]:
        """Return the blob stored under `key`, or None if there is none."""
        ...

    async def set(self, key: str, blob: str) -> None:
        """Store `blob` under `key`, replacing whatever was there."""
        ...
