import pytest

from kv_records.backends.in_memory import InMemoryAsyncBackend
from kv_records.errors import UnsafeOperationError
from kv_records.maintenance import clear_all
from kv_records.store import RecordStore


@pytest.mark.asyncio
async def test_clear_all_requires_non_production_flag() -> None:
    backend = InMemoryAsyncBackend()
    await backend.set("user:1", "{}")

    with pytest.raises(UnsafeOperationError, match="non_production=True"):
        _ = await clear_all(backend)
    assert await backend.get("user:1") == "{}"


@pytest.mark.asyncio
async def test_clear_all_removes_every_prefix() -> None:
    backend = InMemoryAsyncBackend()
    store = RecordStore(backend)
    _ = await store.create_if_absent("user", "1", {"name": "Ann"})
    _ = await store.create_if_absent("session", "abc", {"user": "1"})
    await backend.set("unrelated", "raw")

    assert await clear_all(backend, non_production=True) == 3

    assert await backend.list_keys("") == []
    assert await store.get_all("user") == []
    assert await store.get_all("session") == []


@pytest.mark.asyncio
async def test_clear_all_on_empty_store_is_zero() -> None:
    assert await clear_all(InMemoryAsyncBackend(), non_production=True) == 0
