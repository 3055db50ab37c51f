"""Minimal example for RecordStore using the in-memory backend."""

import asyncio
from dataclasses import dataclass

from kv_records.backends.in_memory import InMemoryAsyncBackend
from kv_records.store import RecordStore


@dataclass
class User:
    """Record model rebuilt by ``get_all``."""

    name: str
    age: int | None = None


async def main() -> None:
    """Run a create/get/update/list/remove flow without external services."""
    store = RecordStore(InMemoryAsyncBackend(), reconstructor=lambda payload: User(**payload))
    try:
        print("created:", await store.create_if_absent("user", "42", {"name": "Ann"}))
        print("created again:", await store.create_if_absent("user", "42", {"name": "Bob"}))
        print("get:", await store.get("user", "42"))
        print("update:", await store.update("user", "42", {"age": 30}))
        _ = await store.create_if_absent("user", "7", User(name="Cid"))
        print("all users:", await store.get_all("user"))
        print("removed:", await store.remove("user", "42"))
    finally:
        await store.close()


if __name__ == "__main__":
    asyncio.run(main())
