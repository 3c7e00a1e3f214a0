from __future__ import annotations

from typing import Protocol, Sequence

from ..core.enums import Collection


class CollectionStore(Protocol):
    """Storage interface for the JSON collections.

    Services depend on this interface, never on a concrete backend, so the
    file store and the in-memory store are interchangeable.
    """

    def read(self, collection: Collection) -> list[dict]:
        """Return a fresh copy of every record; an empty list when nothing is stored."""

        raise NotImplementedError

    def write(self, collection: Collection, records: Sequence[dict]) -> None:
        """Replace the whole collection with ``records``."""

        raise NotImplementedError
