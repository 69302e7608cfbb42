from __future__ import annotations

from enum import Enum


class AlertColor(str, Enum):
    """Alert colors understood by the alert box template."""

    TEAL = "teal"
    RED = "red"
