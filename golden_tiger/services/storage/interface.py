"""
Abstract Key-Value Storage Interface

DESIGN DECISION: The record store only needs a device-local,
string-keyed store of JSON values. We define that contract here so:
1. The file-backed store can be swapped for a platform store later
2. Tests use in-memory storage
3. The record store stays decoupled from where bytes end up

Each call is self-contained: no handles or transactions span calls,
and there are no cross-key guarantees.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class KeyValueStoreInterface(ABC):
    """
    Abstract interface for slot storage.

    Values are anything json.dumps accepts. A missing key reads as None.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """
        Read and decode the value stored under key.

        Returns:
            The decoded value, or None if nothing is stored

        Raises:
            SerializationError: If the stored text is not valid JSON
            StorageError: If the backend cannot be read
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """
        Encode and store value under key, replacing any previous value.

        Raises:
            SerializationError: If value cannot be JSON encoded
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Delete key. Removing a missing key is not an error."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Delete every key in one call."""
        pass

    @abstractmethod
    async def get_all_keys(self) -> list[str]:
        """List stored keys, sorted."""
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class SerializationError(StorageError):
    """Value could not be encoded to, or decoded from, JSON."""
    pass


class InvalidKeyError(StorageError):
    """Key cannot be used as a storage slot name."""
    pass
