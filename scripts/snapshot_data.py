"""Snapshot the JSON data directory.

Note: The API overwrites whole collection files on every backup and wipe; run
this before a DELETE /api/data/all or a risky import to keep a copy.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from config import get_settings_module  # noqa: E402

from src.institute_sync.institute_sync.core.enums import Collection  # noqa: E402


def snapshot(data_dir: Path, out_root: Path) -> Path:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_dir = out_root / f"data_{ts}"
    out_dir.mkdir(parents=True, exist_ok=True)

    for collection in Collection:
        src = data_dir / f"{collection.value}.json"
        if src.exists():
            shutil.copy2(src, out_dir / src.name)
    return out_dir


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    data_dir = Path(settings.DATA_DIR)
    if not data_dir.is_dir():
        raise SystemExit(f"Data directory not found: {data_dir}")

    out_dir = snapshot(data_dir, ROOT / "backups")
    print(f"OK: Snapshot created: {out_dir}")


if __name__ == "__main__":
    main()
