from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.constants import FIELD_CHECKIN, FIELD_CHECKOUT, FIELD_NAME, FIELD_ROLL_NUMBER


@dataclass(frozen=True)
class StudentRecord:
    """Domain entity: one check-in document of the students collection."""

    record_id: str
    roll_number: Optional[str]
    name: str
    checkin: str
    checkout: Optional[str] = None

    @property
    def is_checked_out(self) -> bool:
        return bool(self.checkout)

    @classmethod
    def from_document(cls, record_id: str, data: Mapping[str, Any]) -> "StudentRecord":
        roll = data.get(FIELD_ROLL_NUMBER)
        checkout = data.get(FIELD_CHECKOUT)
        return cls(
            record_id=record_id,
            roll_number=str(roll) if roll is not None else None,
            name=str(data.get(FIELD_NAME) or ""),
            checkin=str(data.get(FIELD_CHECKIN) or ""),
            checkout=str(checkout) if checkout else None,
        )

    def to_document(self) -> dict:
        return {
            FIELD_ROLL_NUMBER: self.roll_number,
            FIELD_NAME: self.name,
            FIELD_CHECKIN: self.checkin,
            FIELD_CHECKOUT: self.checkout,
        }


@dataclass(frozen=True)
class StudentRow:
    """Read-model for one line of the Present Students table."""

    sr_no: int
    record: StudentRecord
    days_attended: int
    percentage: str

    def as_dict(self) -> dict:
        return {
            "sr_no": self.sr_no,
            "id": self.record.record_id,
            "roll_number": self.record.roll_number,
            "name": self.record.name,
            "checkin": self.record.checkin,
            "checkout": self.record.checkout,
            "days_attended": self.days_attended,
            "percentage": self.percentage,
        }
