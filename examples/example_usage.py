"""Example: use the service layer without Flask.

Controllers are a thin layer; the roster logic lives in the services.
"""

import importlib

from config import get_settings_module

from src.school_attendance.school_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(firestore_config=settings.FIRESTORE_CONFIG)
    container.student_service.fetch_students()
    for row in container.student_service.get_rows():
        print(row.as_dict())


if __name__ == "__main__":
    main()
