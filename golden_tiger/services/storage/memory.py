"""
In-Memory Storage Implementation

Keeps the encoded JSON text rather than live objects, so a value read
back is a fresh copy exactly as the file store would return it.
"""

import json
from typing import Any, Optional

from golden_tiger.services.storage.interface import (
    KeyValueStoreInterface,
    SerializationError,
)


class InMemoryKeyValueStore(KeyValueStoreInterface):
    """Dict-backed store for tests and throwaway sessions."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        # key -> raw JSON text
        self._data: dict[str, str] = dict(initial or {})

    def raw(self, key: str) -> Optional[str]:
        """The stored JSON text for key, for inspection."""
        return self._data.get(key)

    async def get(self, key: str) -> Optional[Any]:
        text = self._data.get(key)
        if text is None:
            return None
        try:
            return json.loads(text)
        except ValueError as e:
            raise SerializationError(f"Stored value for {key!r} is not valid JSON: {e}")

    async def set(self, key: str, value: Any) -> None:
        try:
            self._data[key] = json.dumps(value, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Value for {key!r} is not JSON serializable: {e}")

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    async def clear(self) -> None:
        self._data.clear()

    async def get_all_keys(self) -> list[str]:
        return sorted(self._data)
