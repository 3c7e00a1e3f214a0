from __future__ import annotations

import copy
from typing import Optional, Sequence

from ..core.enums import Collection
from .repository import CollectionStore


class InMemoryStore(CollectionStore):
    """Process-local store; records are deep-copied in and out like a file round-trip."""

    def __init__(self, initial: Optional[dict[Collection, Sequence[dict]]] = None):
        self._data: dict[Collection, list[dict]] = {c: [] for c in Collection}
        for collection, records in (initial or {}).items():
            self.write(collection, records)

    def read(self, collection: Collection) -> list[dict]:
        return copy.deepcopy(self._data[collection])

    def write(self, collection: Collection, records: Sequence[dict]) -> None:
        self._data[collection] = copy.deepcopy(list(records))
