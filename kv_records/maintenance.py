"""Destructive maintenance helpers for development and test stores."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from kv_records.errors import UnsafeOperationError


if TYPE_CHECKING:
    from kv_records.backends import Backend


logger = logging.getLogger(__name__)


async def clear_all(backend: Backend, *, non_production: bool = False) -> int:
    """Delete every key in the backing store and return how many were removed.

    This is not scoped to a prefix: it wipes the records of every collection,
    including ones written by unrelated applications sharing the store. It
    refuses to run unless ``non_production`` is passed explicitly.
    """
    if not non_production:
        msg = "clear_all deletes every key in the store; pass non_production=True to confirm"
        raise UnsafeOperationError(msg)

    keys = await backend.list_keys("")
    logger.warning("clearing %d keys from the backing store", len(keys))
    removed = 0
    for key in keys:
        if await backend.delete(key):
            removed += 1
    return removed
