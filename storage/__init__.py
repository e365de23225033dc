from storage.base import KeyValueStore
from storage.codec import SCHEMA_VERSION, round_from_blob, round_to_blob
from storage.confirmation import ConfirmationService, StaticConfirmation
from storage.connection import DatabasePool, db
from storage.exceptions import InvalidBlobError, InvalidUpdateError, RoundStoreError, StorageError
from storage.json_file import JsonFileKeyValueStore
from storage.memory import InMemoryKeyValueStore
from storage.postgres import PostgresKeyValueStore
from storage.round_store import STORAGE_KEY, RoundStore

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "PostgresKeyValueStore",
    "DatabasePool",
    "db",
    "RoundStore",
    "STORAGE_KEY",
    "SCHEMA_VERSION",
    "round_to_blob",
    "round_from_blob",
    "ConfirmationService",
    "StaticConfirmation",
    "RoundStoreError",
    "StorageError",
    "InvalidBlobError",
    "InvalidUpdateError",
]
