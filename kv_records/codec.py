"""JSON text codec for records stored in the backend."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Callable
from typing import Any

from kv_records.errors import DecodeError


def _to_plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _to_plain(dataclasses.asdict(value))
    if isinstance(value, dict):
        return {k: _to_plain(v) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return [_to_plain(item) for item in value]
    return value


class RecordCodec:
    """Convert records to and from the textual payloads the store holds."""

    def __init__(
        self,
        json_encoder: Callable[[Any], str] = json.dumps,
        json_decoder: Callable[[str], Any] = json.loads,
    ) -> None:
        super().__init__()
        self._json_encoder = json_encoder
        self._json_decoder = json_decoder

    def encode(self, record: Any) -> str:
        """Encode a record.

        Dataclass instances are encoded by field and tuples as arrays.
        Values the encoder cannot handle raise the encoder's own error.
        """
        return self._json_encoder(_to_plain(record))

    def decode(self, payload: str) -> Any:
        """Decode a payload, raising ``DecodeError`` when it is malformed."""
        try:
            return self._json_decoder(payload)
        except (ValueError, TypeError) as error:
            msg = f"payload is not valid encoded data: {payload!r:.64}"
            raise DecodeError(msg) from error
