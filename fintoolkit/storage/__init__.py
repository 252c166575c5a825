"""
Storage — persistence of remembered calculator inputs.
"""

from fintoolkit.storage.sticky_store import (
    SNAPSHOT_KEY_PREFIX,
    InMemoryStore,
    InputSnapshotRepository,
    JsonFileStore,
    KeyValueStore,
)

__all__ = [
    "SNAPSHOT_KEY_PREFIX",
    # Stores
    "KeyValueStore",
    "InMemoryStore",
    "JsonFileStore",
    # Repository
    "InputSnapshotRepository",
]
