"""Attendance tally and percentage helpers.

Both functions are pure; they run over whatever record set is loaded.
"""
from __future__ import annotations

from collections import Counter
from typing import Dict, Hashable, Iterable

from ..core.constants import TOTAL_SCHOOL_DAYS


def get_attendance_count(roll_numbers: Iterable[Hashable]) -> Dict[Hashable, int]:
    """Return how many times each registration number appears."""
    return dict(Counter(roll_numbers))


def calculate_percentage(attendance_count: int, total_days: int = TOTAL_SCHOOL_DAYS) -> str:
    """Attendance over the window as a two-decimal string.

    Counts above ``total_days`` are not capped, e.g. 180 days gives "200.00".
    """
    return f"{(attendance_count / total_days) * 100:.2f}"
