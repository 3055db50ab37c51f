"""Errors raised by record storage operations."""

from __future__ import annotations


class StorageError(Exception):
    """Base class for all kv-records errors."""


class StoreConnectionError(StorageError):
    """The backing store could not be reached."""


class StoreReadError(StorageError):
    """The backing store failed to read a key or enumerate keys."""


class StoreWriteError(StorageError):
    """The backing store failed to write a key."""


class StoreDeleteError(StorageError):
    """The backing store failed to delete a key."""


class DecodeError(StorageError):
    """A stored payload is not valid encoded data for a record."""


class UnsafeOperationError(StorageError):
    """A destructive operation was requested without the explicit opt-in."""
