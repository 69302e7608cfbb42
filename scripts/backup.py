"""Backup the students collection to a JSON file under backups/."""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_attendance.school_attendance.container import build_container
from src.school_attendance.school_attendance.core.exceptions import StoreError


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(firestore_config=settings.FIRESTORE_CONFIG)

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"students_{ts}.json"

    try:
        records = container.students_repo.list_all()
    except StoreError as e:
        raise SystemExit(f"Backup failed: {e}")

    payload = {r.record_id: r.to_document() for r in records}
    out_file.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({len(payload)} documents)")


if __name__ == "__main__":
    main()
