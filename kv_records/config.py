"""Connection settings for the backing store."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Mapping


DEFAULT_HOST = "localhost"
DEFAULT_PORT = 6379


def _parse_int(raw: str | None, default: int) -> int:
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value or default


@dataclass(frozen=True)
class StoreSettings:
    """Where the backing store lives.

    ``url`` wins over ``host``/``port``/``db`` when it is set.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    db: int = 0
    url: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> StoreSettings:
        """Build settings from ``STORAGE_*`` environment variables.

        Parameters
        ----------
        environ
            Mapping to read from. Defaults to ``os.environ``.
        """
        env = os.environ if environ is None else environ
        return cls(
            host=env.get("STORAGE_HOST") or DEFAULT_HOST,
            port=_parse_int(env.get("STORAGE_PORT"), DEFAULT_PORT),
            db=_parse_int(env.get("STORAGE_DB"), 0),
            url=env.get("STORAGE_URL") or None,
        )

    @property
    def redis_url(self) -> str:
        """Connection URL for ``redis.asyncio.from_url``."""
        if self.url:
            return self.url
        return f"redis://{self.host}:{self.port}/{self.db}"
