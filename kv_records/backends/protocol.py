"""Backend interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Backend(ABC):
    """Async key-value backend interface.

    Backends store raw text payloads under flat string keys. They know nothing
    about prefixes, records or encoding.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return raw value for key, or None when key does not exist."""

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store raw value for key, replacing any existing value."""

    async def set_if_absent(self, key: str, value: str) -> bool:
        """Store raw value only when key does not exist yet.

        Returns True when the value was written. This default checks and then
        writes in two round-trips, so two concurrent callers can both see the
        key as absent and the later write wins. Backends with a native
        conditional write should override it.
        """
        if await self.get(key) is not None:
            return False
        await self.set(key, value)
        return True

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete key if present and return whether anything was removed."""

    @abstractmethod
    async def list_keys(self, prefix: str) -> list[str]:
        """List all keys beginning with prefix. An empty prefix lists every key."""

    @abstractmethod
    async def close(self) -> None:
        """Close any backend resources."""
