from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .common.datetime_utils import require_timezone
from .core.constants import DEFAULT_CHECKOUT_TIME_FORMAT, STUDENTS_COLLECTION
from .database.connection import FirestoreConfig, FirestoreConnection
from .notifications.alerts import SessionAlertChannel
from .students.firestore_student_repository import FirestoreStudentRepository
from .students.repository import StudentRepository
from .students.roster import StudentRoster
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    conn: Optional[FirestoreConnection]

    students_repo: StudentRepository
    roster: StudentRoster
    alerts: SessionAlertChannel

    student_service: StudentService


def build_container(
    *,
    firestore_config: dict,
    timezone: Optional[str] = None,
    checkout_time_format: str = DEFAULT_CHECKOUT_TIME_FORMAT,
) -> Container:
    config = FirestoreConfig(
        project_id=firestore_config.get("project_id") or None,
        credentials_path=firestore_config.get("credentials_path") or None,
        collection=str(firestore_config.get("collection") or STUDENTS_COLLECTION),
    )
    conn = FirestoreConnection.get_instance(config)
    return build_container_with_repository(
        FirestoreStudentRepository(conn),
        conn=conn,
        timezone=timezone,
        checkout_time_format=checkout_time_format,
    )


def build_container_with_repository(
    students_repo: StudentRepository,
    *,
    conn: Optional[FirestoreConnection] = None,
    timezone: Optional[str] = None,
    checkout_time_format: str = DEFAULT_CHECKOUT_TIME_FORMAT,
) -> Container:
    roster = StudentRoster()
    alerts = SessionAlertChannel()
    student_service = StudentService(
        students_repo,
        roster,
        alerts,
        timezone=require_timezone(timezone),
        checkout_time_format=checkout_time_format,
    )

    return Container(
        conn=conn,
        students_repo=students_repo,
        roster=roster,
        alerts=alerts,
        student_service=student_service,
    )
