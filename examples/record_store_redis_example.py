"""Minimal example for RecordStore using a Redis-compatible backend.

Connection settings come from ``STORAGE_HOST``/``STORAGE_PORT`` or ``STORAGE_URL``.
"""

import asyncio
import logging

from kv_records.backends.redis import RedisBackend
from kv_records.config import StoreSettings
from kv_records.maintenance import clear_all
from kv_records.store import RecordStore


async def main() -> None:
    """Run a basic flow against Redis/Dragonfly, then reset the dev store."""
    backend = RedisBackend.from_settings(StoreSettings.from_env())
    store = RecordStore(backend)
    try:
        _ = await store.create_if_absent("session", "abc", {"user": "42", "scopes": ["read"]})
        _ = await store.update("session", "abc", {"scopes": ["read", "write"]})
        print("session:", await store.get("session", "abc"))
        print("sessions:", await store.get_all("session"))

        # development store only: removes every key, not just the sessions
        print("cleared:", await clear_all(backend, non_production=True))
    finally:
        await store.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
