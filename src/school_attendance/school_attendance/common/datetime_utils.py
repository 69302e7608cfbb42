from __future__ import annotations

from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.constants import CHECKIN_FORMATS
from ..core.exceptions import ValidationError


def now_local(tz_name: Optional[str] = None) -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    if tz_name:
        return datetime.now(ZoneInfo(tz_name))
    return datetime.now()


def require_timezone(tz_name: Optional[str]) -> Optional[str]:
    """Check an IANA zone name up front; empty means server local time."""
    if not tz_name:
        return None
    try:
        ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValidationError(f"Unknown TIMEZONE setting: {tz_name!r}") from e
    return tz_name


def format_local_time(moment: datetime, fmt: str) -> str:
    return moment.strftime(fmt)


def parse_checkin(value: str) -> Optional[datetime]:
    """Parse a stored check-in string into a naive datetime.

    Returns None when the value cannot be understood.
    """
    if not isinstance(value, str) or not value.strip():
        return None

    text = value.strip()
    try:
        return _to_naive_local(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        pass

    for fmt in CHECKIN_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def _to_naive_local(moment: datetime) -> datetime:
    # Aware values are compared as local wall-clock time, like naive strings.
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)
