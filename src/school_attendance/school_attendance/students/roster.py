from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, Sequence, Tuple

from .attendance import calculate_percentage, get_attendance_count
from .model import StudentRecord, StudentRow


@dataclass(frozen=True)
class RosterSnapshot:
    students: Tuple[StudentRecord, ...] = ()
    tally: Dict[Hashable, int] = field(default_factory=dict)


class StudentRoster:
    """Currently loaded record set and its tally.

    The snapshot is swapped in one assignment, so a reader never sees
    students from one fetch with the tally of another.
    """

    def __init__(self) -> None:
        self._snapshot = RosterSnapshot()
        self._loaded = False

    @property
    def students(self) -> Tuple[StudentRecord, ...]:
        return self._snapshot.students

    @property
    def tally(self) -> Dict[Hashable, int]:
        return dict(self._snapshot.tally)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def replace(self, students: Sequence[StudentRecord]) -> None:
        records = tuple(students)
        tally = get_attendance_count(r.roll_number for r in records)
        self._snapshot = RosterSnapshot(students=records, tally=tally)
        self._loaded = True

    def rows(self) -> list[StudentRow]:
        snap = self._snapshot
        rows = []
        for index, record in enumerate(snap.students, start=1):
            days = snap.tally.get(record.roll_number, 0)
            rows.append(
                StudentRow(
                    sr_no=index,
                    record=record,
                    days_attended=days,
                    percentage=calculate_percentage(days),
                )
            )
        return rows
