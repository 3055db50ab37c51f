"""Prefix-namespaced record storage over an async key-value backend."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from kv_records.codec import RecordCodec
from kv_records.errors import DecodeError
from kv_records.key_mapping import KeyNamespacer


if TYPE_CHECKING:
    from kv_records.backends import Backend


logger = logging.getLogger(__name__)


class RecordStore:
    """Store records under ``(prefix, key)`` pairs in a backend.

    The backend is the only source of truth; nothing is cached in process.
    Every operation issues one or more independent backend round-trips and no
    locking is done here, so:

    * ``update`` reads, merges and writes back in separate calls. Concurrent
      writers to the same key can lose updates.
    * ``get_all`` lists keys and then reads each one. Keys created or removed in
      between may or may not show up.
    * ``create_if_absent`` relies on ``Backend.set_if_absent``. It is atomic on
      Redis (``SET NX``) and on the in-memory backend, and a check-then-write
      race on backends that only have the default implementation.
    """

    def __init__(
        self,
        backend: Backend,
        *,
        reconstructor: Callable[[Any], Any] | None = None,
        codec: RecordCodec | None = None,
        namespacer: KeyNamespacer | None = None,
    ) -> None:
        """Create a store.

        Parameters
        ----------
        backend
            Backend holding the encoded payloads.
        reconstructor
            Optional factory turning a decoded payload into a typed model.
            Applied to every entry returned by ``get_all``. When omitted the
            decoded payloads are returned as-is.
        codec
            Payload codec. Defaults to JSON.
        namespacer
            Physical key scheme. Defaults to ``prefix:key``.
        """
        super().__init__()
        self._backend = backend
        self._reconstructor = reconstructor
        self._codec = codec if codec is not None else RecordCodec()
        self._namespacer = namespacer if namespacer is not None else KeyNamespacer()

    async def create_if_absent(self, prefix: str, key: str, value: Any) -> bool:
        """Write ``value`` only if nothing is stored under ``(prefix, key)`` yet.

        Returns False, without writing, when the key already exists. Use
        ``update`` to change an existing record.
        """
        physical_key = self._namespacer.physical_key(prefix, key)
        created = await self._backend.set_if_absent(physical_key, self._codec.encode(value))
        logger.debug("create %s: %s", physical_key, "created" if created else "already exists")
        return created

    # Kept under the short name too; it never overwrites.
    set = create_if_absent

    async def get(self, prefix: str, key: str, default: Any = None) -> Any:
        """Return the stored record, or ``default`` when the key does not exist.

        A record stored as JSON ``null`` decodes to None. Pass a sentinel as
        ``default`` to tell it apart from a missing key. A stored payload that
        cannot be decoded raises ``DecodeError``.
        """
        physical_key = self._namespacer.physical_key(prefix, key)
        raw_value = await self._backend.get(physical_key)
        if raw_value is None:
            logger.debug("get %s: not found", physical_key)
            return default
        return self._codec.decode(raw_value)

    async def update(self, prefix: str, key: str, partial: Mapping[str, Any]) -> Any:
        """Shallow-merge ``partial`` into the stored record and return the result.

        When nothing is stored yet, ``partial`` is created as the full record
        and returned unchanged, even if it only holds some of a model's fields.
        A stored record that is not a mapping, ``null`` included, raises
        ``TypeError``.
        """
        physical_key = self._namespacer.physical_key(prefix, key)
        raw_value = await self._backend.get(physical_key)
        if raw_value is None:
            if not await self.create_if_absent(prefix, key, partial):
                logger.warning("update %s: key was created concurrently, partial value not written", physical_key)
            return partial

        current = self._codec.decode(raw_value)
        if not isinstance(current, Mapping):
            msg = f"cannot merge fields into non-object record at '{physical_key}'"
            raise TypeError(msg)

        merged = {**current, **partial}
        await self._backend.set(physical_key, self._codec.encode(merged))
        logger.debug("update %s: merged fields %s", physical_key, sorted(partial))
        return merged

    async def remove(self, prefix: str, key: str) -> bool:
        """Delete the record and return whether one was stored."""
        physical_key = self._namespacer.physical_key(prefix, key)
        removed = await self._backend.delete(physical_key)
        logger.debug("remove %s: %s", physical_key, "removed" if removed else "not found")
        return removed

    async def get_all(self, prefix: str) -> list[Any]:
        """Return every record stored under ``prefix``.

        Order is not part of the contract. Any entry that fails to decode or
        reconstruct fails the whole call with ``DecodeError``.
        """
        physical_keys = await self._backend.list_keys(self._namespacer.prefix_pattern(prefix))
        records: list[Any] = []
        for physical_key in physical_keys:
            raw_value = await self._backend.get(physical_key)
            if raw_value is None:
                continue
            try:
                decoded = self._codec.decode(raw_value)
            except DecodeError as error:
                msg = f"payload of {self._describe(physical_key)} is not valid encoded data"
                raise DecodeError(msg) from error
            records.append(self._reconstruct(physical_key, decoded))
        logger.debug("get_all %s: %d records", prefix, len(records))
        return records

    def _describe(self, physical_key: str) -> str:
        prefix, key = self._namespacer.split(physical_key)
        return f"{prefix}/{key} at '{physical_key}'"

    def _reconstruct(self, physical_key: str, decoded: Any) -> Any:
        if self._reconstructor is None:
            return decoded
        try:
            return self._reconstructor(decoded)
        except (TypeError, ValueError) as error:
            msg = f"payload of {self._describe(physical_key)} does not match the record model: {error}"
            raise DecodeError(msg) from error

    async def close(self) -> None:
        """Close the backend."""
        await self._backend.close()
