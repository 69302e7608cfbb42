from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import format_local_time, now_local, parse_checkin
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_CHECKOUT_TIME_FORMAT
from ..core.enums import AlertColor
from ..core.exceptions import DomainError
from ..notifications.alerts import AlertBox, AlertChannel
from .model import StudentRecord, StudentRow
from .repository import StudentRepository
from .roster import StudentRoster

logger = logging.getLogger(__name__)


def sort_by_checkin(records: Sequence[StudentRecord]) -> list[StudentRecord]:
    """Oldest check-in first; unparseable check-ins keep their order at the end."""

    def key(record: StudentRecord):
        parsed = parse_checkin(record.checkin)
        return (parsed is None, parsed or datetime.min)

    return sorted(records, key=key)


class StudentService:
    def __init__(
        self,
        students: StudentRepository,
        roster: StudentRoster,
        alerts: AlertChannel,
        *,
        timezone: Optional[str] = None,
        checkout_time_format: str = DEFAULT_CHECKOUT_TIME_FORMAT,
        clock: Callable[[Optional[str]], datetime] = now_local,
    ):
        self._students = students
        self._roster = roster
        self._alerts = alerts
        self._timezone = timezone
        self._checkout_time_format = checkout_time_format
        self._clock = clock

    @property
    def roster(self) -> StudentRoster:
        return self._roster

    def fetch_students(self) -> bool:
        """Reload the roster from the store.

        On failure the previous roster is kept and False is returned; nothing
        is shown to the user.
        """
        try:
            records = self._students.list_all()
        except DomainError:
            logger.exception("Error fetching students")
            return False
        except Exception:
            # Fetch failures never reach the page.
            logger.exception("Unexpected error fetching students")
            return False

        self._roster.replace(sort_by_checkin(records))
        logger.debug("Loaded %d student records", len(self._roster.students))
        return True

    def check_out(self, record_id: str, name: str, *, notify: bool = True) -> AlertBox:
        """Set the checkout time of one record, then reload the roster.

        The re-fetch happens exactly once whatever the outcome. With
        ``notify=False`` the alert is only returned, not raised on the channel.
        """
        alert = AlertBox(title="Error!", message="Checkout failed", color=AlertColor.RED)
        try:
            record_id = require_non_empty(record_id, "Record id")
            stamp = format_local_time(self._clock(self._timezone), self._checkout_time_format)
            self._students.set_checkout(record_id, stamp)
            alert = AlertBox(
                title="Successfully Checked-Out",
                message=f"{name} checked-out",
                color=AlertColor.TEAL,
            )
            logger.info("Checked out %s (%s) at %s", name, record_id, stamp)
        except DomainError as e:
            alert = AlertBox(title="Error!", message=str(e), color=AlertColor.RED)
            logger.error("Error during checkout of %s: %s", record_id, e)
        except Exception as e:
            alert = AlertBox(title="Error!", message=str(e) or alert.message, color=AlertColor.RED)
            logger.exception("Unexpected error during checkout of %s", record_id)
        finally:
            if notify:
                self._alerts.raise_alert(alert)
            self.fetch_students()
        return alert

    def get_rows(self) -> list[StudentRow]:
        return self._roster.rows()
