"""Services package."""

from golden_tiger.services.storage import (
    InMemoryKeyValueStore,
    InvalidKeyError,
    JsonFileKeyValueStore,
    KeyValueStoreInterface,
    SerializationError,
    StorageError,
)

__all__ = [
    "InMemoryKeyValueStore",
    "InvalidKeyError",
    "JsonFileKeyValueStore",
    "KeyValueStoreInterface",
    "SerializationError",
    "StorageError",
]
