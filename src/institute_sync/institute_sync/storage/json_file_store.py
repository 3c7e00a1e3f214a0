from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Sequence

from ..core.enums import Collection
from .repository import CollectionStore

logger = logging.getLogger(__name__)


class JsonFileStore(CollectionStore):
    """One JSON array per collection under ``data_dir``.

    Note: Reads never fail; a missing or corrupt file yields an empty collection.
    Writes go through a temp file + rename, but there is no locking between
    concurrent writers.
    """

    def __init__(self, data_dir: str | os.PathLike):
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, collection: Collection) -> Path:
        return self._data_dir / f"{collection.value}.json"

    def read(self, collection: Collection) -> list[dict]:
        path = self.path_for(collection)
        if not path.exists():
            return []
        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read %s, treating it as empty: %s", path, e)
            return []
        if not isinstance(data, list):
            logger.warning("%s does not hold a JSON array, treating it as empty", path)
            return []
        return data

    def write(self, collection: Collection, records: Sequence[dict]) -> None:
        path = self.path_for(collection)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{collection.value}.", suffix=".tmp", dir=self._data_dir)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(list(records), f, indent=2, ensure_ascii=False)
            os.replace(tmp_name, path)
        except Exception:
            logger.error("Failed writing %s", path)
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
