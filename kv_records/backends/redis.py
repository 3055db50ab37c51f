"""Redis-compatible backend implementation."""

from __future__ import annotations

import re
from contextlib import contextmanager
from inspect import isawaitable
from typing import TYPE_CHECKING, Any, override

import redis.asyncio as redis_async
from redis import exceptions as redis_exceptions

from kv_records.errors import (
    StorageError,
    StoreConnectionError,
    StoreDeleteError,
    StoreReadError,
    StoreWriteError,
)

from .protocol import Backend


if TYPE_CHECKING:
    from collections.abc import Iterator

    from kv_records.config import StoreSettings


_GLOB_SPECIAL = re.compile(r"([\\*?\[\]])")


def _normalize_string(value: str | bytes | None) -> str | None:
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode()
    return value


def _escape_pattern(prefix: str) -> str:
    return _GLOB_SPECIAL.sub(r"\\\1", prefix)


@contextmanager
def _translate_errors(operation: str, key: str, error_type: type[StorageError]) -> Iterator[None]:
    try:
        yield
    except (redis_exceptions.ConnectionError, redis_exceptions.TimeoutError, OSError) as error:
        msg = f"redis is unreachable during {operation} of '{key}'"
        raise StoreConnectionError(msg) from error
    except redis_exceptions.RedisError as error:
        msg = f"redis {operation} of '{key}' failed: {error}"
        raise error_type(msg) from error


class RedisBackend(Backend):
    """Redis-compatible async backend using ``redis.asyncio`` client APIs."""

    def __init__(self, url: str = "redis://localhost:6379/0", *, client: Any | None = None) -> None:
        """Create a backend from URL or an injected async client.

        Parameters
        ----------
        url
            Redis connection URL used when ``client`` is not provided.
        client
            Optional injected client with ``get/set/delete/scan_iter/aclose`` API.
        """
        super().__init__()
        self._url = url
        if client is not None:
            self._client = client
            return

        self._client = redis_async.from_url(url, decode_responses=True)

    @classmethod
    def from_settings(cls, settings: StoreSettings) -> RedisBackend:
        """Create a backend connected to the store described by ``settings``."""
        return cls(url=settings.redis_url)

    @override
    async def get(self, key: str) -> str | None:
        """Return raw value for key, or None when key does not exist."""
        with _translate_errors("read", key, StoreReadError):
            return _normalize_string(await self._client.get(key))

    @override
    async def set(self, key: str, value: str) -> None:
        """Store raw value for key."""
        with _translate_errors("write", key, StoreWriteError):
            await self._client.set(key, value)

    @override
    async def set_if_absent(self, key: str, value: str) -> bool:
        """Store raw value with ``SET NX`` so the existence check is atomic."""
        with _translate_errors("write", key, StoreWriteError):
            result = await self._client.set(key, value, nx=True)
        return bool(result)

    @override
    async def delete(self, key: str) -> bool:
        """Delete key if present."""
        with _translate_errors("delete", key, StoreDeleteError):
            removed = await self._client.delete(key)
        return bool(removed)

    @override
    async def list_keys(self, prefix: str) -> list[str]:
        """List all keys beginning with prefix in sorted order."""
        keys: list[str] = []
        with _translate_errors("scan", f"{prefix}*", StoreReadError):
            async for key in self._client.scan_iter(match=f"{_escape_pattern(prefix)}*"):
                normalized = _normalize_string(key)
                if normalized is not None:
                    keys.append(normalized)
        return sorted(keys)

    @override
    async def close(self) -> None:
        """Release backend resources."""
        close_method = getattr(self._client, "aclose", None)
        if close_method is None:
            close_method = getattr(self._client, "close", None)
        if close_method is None:
            return

        maybe_awaitable = close_method()
        if isawaitable(maybe_awaitable):
            await maybe_awaitable
