from __future__ import annotations

from typing import Protocol, Sequence

from .model import Worker


class WorkerRepository(Protocol):
    """Durable copy of the whole roster.

    Note (DIP): the controller depends on this interface, not on the key-value layer.
    """

    def load(self) -> Sequence[Worker]:
        """Return the stored roster, or an empty sequence when there is none."""

        raise NotImplementedError

    def save(self, roster: Sequence[Worker]) -> None:
        """Replace the stored roster entirely."""

        raise NotImplementedError
