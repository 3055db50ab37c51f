"""kv-records - prefix-namespaced record storage over Redis-compatible stores"""

from ._version import version as __version__
from .backends import Backend, InMemoryAsyncBackend, RedisBackend
from .codec import RecordCodec
from .config import StoreSettings
from .errors import (
    DecodeError,
    StorageError,
    StoreConnectionError,
    StoreDeleteError,
    StoreReadError,
    StoreWriteError,
    UnsafeOperationError,
)
from .key_mapping import KeyNamespacer
from .maintenance import clear_all
from .store import RecordStore


__all__ = [
    "Backend",
    "DecodeError",
    "InMemoryAsyncBackend",
    "KeyNamespacer",
    "RecordCodec",
    "RecordStore",
    "RedisBackend",
    "StorageError",
    "StoreConnectionError",
    "StoreDeleteError",
    "StoreReadError",
    "StoreSettings",
    "StoreWriteError",
    "UnsafeOperationError",
    "__version__",
    "clear_all",
]
