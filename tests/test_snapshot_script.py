from __future__ import annotations

import importlib.util
from pathlib import Path

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "snapshot_data.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("snapshot_data", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_snapshot_copies_only_collection_files(tmp_path):
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    (data_dir / "students.json").write_text('[{"id": "s1"}]', encoding="utf-8")
    (data_dir / "sync_history.json").write_text("[]", encoding="utf-8")
    (data_dir / "notes.txt").write_text("ignore me", encoding="utf-8")

    out_dir = _load_script().snapshot(data_dir, tmp_path / "backups")

    assert sorted(p.name for p in out_dir.iterdir()) == ["students.json", "sync_history.json"]
    assert (out_dir / "students.json").read_text(encoding="utf-8") == '[{"id": "s1"}]'
