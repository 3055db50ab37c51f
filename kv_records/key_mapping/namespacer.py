"""Physical key derivation for prefix-namespaced records."""

from __future__ import annotations


class KeyNamespacer:
    """Map logical ``(prefix, key)`` pairs to backend keys and back.

    A physical key is ``prefix + sep + key``. Prefixes may not contain the
    separator while keys may, so splitting at the first separator always
    recovers the original pair.
    """

    def __init__(self, sep: str = ":") -> None:
        super().__init__()
        if not sep:
            msg = "sep must not be empty"
            raise ValueError(msg)
        self.sep = sep

    def _check_prefix(self, prefix: str) -> None:
        if not prefix:
            msg = "prefix must not be empty"
            raise ValueError(msg)
        if self.sep in prefix:
            msg = "prefix must not contain separator"
            raise ValueError(msg)

    def physical_key(self, prefix: str, key: str) -> str:
        """Build the backend key for a logical pair."""
        self._check_prefix(prefix)
        if not key:
            msg = "key must not be empty"
            raise ValueError(msg)
        return f"{prefix}{self.sep}{key}"

    def prefix_pattern(self, prefix: str) -> str:
        """Return the string every backend key of ``prefix`` starts with."""
        self._check_prefix(prefix)
        return f"{prefix}{self.sep}"

    def split(self, physical_key: str) -> tuple[str, str]:
        """Convert a backend key back into its ``(prefix, key)`` pair."""
        prefix, found, key = physical_key.partition(self.sep)
        if not found or not prefix or not key:
            msg = f"key is not a namespaced record key: {physical_key}"
            raise ValueError(msg)
        return prefix, key
