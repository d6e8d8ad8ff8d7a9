"""
Storage Services Package

Provides the abstract key-value interface and concrete implementations.
JSON files on disk for the app, in-memory for tests.
"""

from golden_tiger.services.storage.interface import (
    InvalidKeyError,
    KeyValueStoreInterface,
    SerializationError,
    StorageError,
)
from golden_tiger.services.storage.json_file import JsonFileKeyValueStore
from golden_tiger.services.storage.memory import InMemoryKeyValueStore

__all__ = [
    # Interface
    "KeyValueStoreInterface",
    # Exceptions
    "InvalidKeyError",
    "SerializationError",
    "StorageError",
    # Implementations
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
]
