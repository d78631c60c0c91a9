from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Interface of one namespaced key-value slot collection.

    Note (DIP): the worker repository depends on this interface, not on a concrete database.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def put(self, key: str, value: str) -> None:
        """Replace the whole value stored under ``key``."""

        raise NotImplementedError
