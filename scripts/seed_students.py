"""Seed demo check-in documents into the students collection.

Check-ins normally come from the kiosk; this is only for local development.
"""
from __future__ import annotations

import importlib
import sys
from datetime import datetime, timedelta
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.school_attendance.school_attendance.database.connection import FirestoreConfig, FirestoreConnection
from src.school_attendance.school_attendance.database.firestore_base import store_call

DEMO_STUDENTS = [
    ("101", "Aarav Sharma"),
    ("102", "Sara Khan"),
    ("103", "Liam Chen"),
    ("101", "Aarav Sharma"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    fs = dict(settings.FIRESTORE_CONFIG)
    conn = FirestoreConnection.get_instance(
        FirestoreConfig(
            project_id=fs.get("project_id") or None,
            credentials_path=fs.get("credentials_path") or None,
            collection=fs.get("collection") or "students",
        )
    )

    start = datetime.now().replace(hour=8, minute=0, second=0, microsecond=0) - timedelta(days=1)
    with store_call("Seeding students"):
        collection = conn.client().collection(conn.collection_name)
        for i, (roll, name) in enumerate(DEMO_STUDENTS):
            checkin = start + timedelta(days=i // 3, minutes=7 * i)
            collection.add({"rollNumber": roll, "name": name, "checkin": checkin.strftime("%m/%d/%Y, %I:%M:%S %p")})

    print(f"OK: Seeded {len(DEMO_STUDENTS)} check-ins -> {fs.get('project_id') or '<default project>'}/{conn.collection_name}")


if __name__ == "__main__":
    main()
